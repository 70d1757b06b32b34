from fastapi import Depends
from sqlalchemy.orm import Session

from ..crud import SQLBookingRequestRepository
from ..database import get_db
from ..services.intake_wizard import LoggingSubmissionBackend, SubmissionBackend


def get_booking_request_repository(
    db: Session = Depends(get_db),
) -> SQLBookingRequestRepository:
    return SQLBookingRequestRepository(db)


def get_submission_backend() -> SubmissionBackend:
    return LoggingSubmissionBackend()
