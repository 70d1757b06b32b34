from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import ORJSONResponse
from typing import List
import logging

from .. import models, schemas
from ..crud import SQLBookingRequestRepository
from ..services import triage
from ..utils import error_response, not_found
from .dependencies import get_booking_request_repository

# Prefix is added when this router is included in `artistly/main.py`.
router = APIRouter(
    tags=["Booking Requests"],
    default_response_class=ORJSONResponse,
)

logger = logging.getLogger(__name__)


def _get_or_404(
    repository: SQLBookingRequestRepository, request_id: str
) -> models.BookingRequest:
    db_request = repository.get(request_id)
    if db_request is None:
        logger.warning("Booking request %s not found", request_id)
        raise not_found("Booking request", "request_id")
    return db_request


@router.get(
    "/",
    response_model=List[schemas.BookingRequestResponse],
    summary="List booking requests for the dashboard",
)
def list_booking_requests(
    status_filter: schemas.StatusFilter = Query("all", alias="status"),
    search: str = Query(""),
    repository: SQLBookingRequestRepository = Depends(get_booking_request_repository),
):
    """Return requests matching ``status`` (or ``all``) and a case-insensitive
    ``search`` over artist name and location."""
    return triage.filter_requests(repository.list_all(), status=status_filter, search=search)


@router.get(
    "/stats",
    response_model=schemas.BookingRequestStats,
    summary="Get dashboard stats",
)
def get_dashboard_stats(
    repository: SQLBookingRequestRepository = Depends(get_booking_request_repository),
):
    """Return total, pending, approved and rejected request counts."""
    return triage.status_counts(repository.list_all())


@router.get("/{request_id}", response_model=schemas.BookingRequestResponse)
def read_booking_request(
    request_id: str,
    repository: SQLBookingRequestRepository = Depends(get_booking_request_repository),
):
    return _get_or_404(repository, request_id)


@router.get(
    "/{request_id}/details",
    response_model=schemas.BookingRequestDetails,
    summary="Read-only summary of a booking request",
)
def read_booking_request_details(
    request_id: str,
    repository: SQLBookingRequestRepository = Depends(get_booking_request_repository),
):
    return triage.describe_request(_get_or_404(repository, request_id))


async def _transition(
    repository: SQLBookingRequestRepository,
    request_id: str,
    target: models.RequestStatus,
) -> models.BookingRequest:
    try:
        return await triage.transition_status(repository, request_id, target)
    except triage.RequestNotFound:
        logger.warning("Booking request %s not found for %s", request_id, target.value)
        raise not_found("Booking request", "request_id")
    except triage.InvalidTransition as exc:
        raise error_response(
            f"Cannot update request in status: {exc.current.value}",
            {"status": "Invalid state"},
            status.HTTP_409_CONFLICT,
        )


@router.post(
    "/{request_id}/approve",
    response_model=schemas.BookingRequestResponse,
    summary="Approve a pending booking request",
)
async def approve_booking_request(
    request_id: str,
    repository: SQLBookingRequestRepository = Depends(get_booking_request_repository),
):
    return await _transition(repository, request_id, models.RequestStatus.APPROVED)


@router.post(
    "/{request_id}/reject",
    response_model=schemas.BookingRequestResponse,
    summary="Reject a pending booking request",
)
async def reject_booking_request(
    request_id: str,
    repository: SQLBookingRequestRepository = Depends(get_booking_request_repository),
):
    return await _transition(repository, request_id, models.RequestStatus.REJECTED)
