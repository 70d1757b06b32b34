from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models

# --- BookingRequest CRUD ---


def get_booking_requests(db: Session) -> List[models.BookingRequest]:
    return db.query(models.BookingRequest).order_by(models.BookingRequest.id).all()


def get_booking_request(db: Session, request_id: str) -> Optional[models.BookingRequest]:
    return (
        db.query(models.BookingRequest)
        .filter(models.BookingRequest.id == request_id)
        .first()
    )


def update_booking_request_status(
    db: Session,
    db_booking_request: models.BookingRequest,
    status: models.RequestStatus,
) -> models.BookingRequest:
    db_booking_request.status = status
    db.commit()
    db.refresh(db_booking_request)
    return db_booking_request


class SQLBookingRequestRepository:
    """Booking-request storage for the triage service, backed by a session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self) -> List[models.BookingRequest]:
        return get_booking_requests(self.db)

    def get(self, request_id: str) -> Optional[models.BookingRequest]:
        # Reload from the database so decisions made by other sessions show up
        return (
            self.db.query(models.BookingRequest)
            .populate_existing()
            .filter(models.BookingRequest.id == request_id)
            .first()
        )

    def set_status(
        self, request: models.BookingRequest, status: models.RequestStatus
    ) -> models.BookingRequest:
        return update_booking_request_status(self.db, request, status)
