"""Booking-request triage for the manager dashboard."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from datetime import date
from typing import Any, Iterable, Optional, Protocol, Sequence, TypeVar

from ..core.config import settings
from ..models.request_status import RequestStatus, TERMINAL_STATUSES
from ..utils.fields import read_field

logger = logging.getLogger(__name__)

T = TypeVar("T")

ALL_STATUSES = "all"


class RequestNotFound(LookupError):
    def __init__(self, request_id: str) -> None:
        super().__init__(f"Booking request {request_id} not found")
        self.request_id = request_id


class InvalidTransition(ValueError):
    def __init__(self, request_id: str, current: RequestStatus, target: RequestStatus) -> None:
        super().__init__(
            f"Cannot move booking request {request_id} from {current.value} to {target.value}"
        )
        self.request_id = request_id
        self.current = current
        self.target = target


class BookingRequestRepository(Protocol):
    """Storage the dashboard reads requests from and writes decisions to."""

    def list_all(self) -> Sequence[Any]: ...

    def get(self, request_id: str) -> Optional[Any]: ...

    def set_status(self, request: Any, status: RequestStatus) -> Any: ...


def _status_of(source: Any) -> RequestStatus:
    return RequestStatus(read_field(source, "status"))


def filter_requests(
    requests: Iterable[T],
    status: str = ALL_STATUSES,
    search: str = "",
) -> list[T]:
    """Return requests matching the status filter and the search term.

    The search is a case-insensitive substring match against the artist name
    or the location; an empty term matches everything.
    """
    wanted = None if status == ALL_STATUSES else RequestStatus(status)
    needle = (search or "").lower()
    visible: list[T] = []
    for request in requests:
        if wanted is not None and _status_of(request) != wanted:
            continue
        name = str(read_field(request, "artist_name") or "").lower()
        location = str(read_field(request, "location") or "").lower()
        if needle in name or needle in location:
            visible.append(request)
    return visible


def status_counts(requests: Iterable[Any]) -> dict[str, int]:
    counts = Counter(_status_of(r) for r in requests)
    return {
        "total": sum(counts.values()),
        "pending": counts[RequestStatus.PENDING],
        "approved": counts[RequestStatus.APPROVED],
        "rejected": counts[RequestStatus.REJECTED],
    }


def format_request_date(value: date | str) -> str:
    """Format a request date the way the dashboard shows it (``Jan 15, 2024``)."""
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return f"{value:%b} {value.day}, {value.year}"


def describe_request(request: Any) -> dict[str, Any]:
    categories = read_field(request, "category") or []
    return {
        "id": read_field(request, "id"),
        "artist_name": read_field(request, "artist_name"),
        "category": ", ".join(categories),
        "location": read_field(request, "location"),
        "fee_range": read_field(request, "fee_range"),
        "status": _status_of(request),
        "request_date": format_request_date(read_field(request, "request_date")),
    }


def _check_transition(
    request: Any,
    request_id: str,
    target: RequestStatus,
    enforce_pending: bool,
) -> None:
    if target not in TERMINAL_STATUSES:
        raise InvalidTransition(request_id, _status_of(request), target)
    current = _status_of(request)
    if enforce_pending and current != RequestStatus.PENDING:
        raise InvalidTransition(request_id, current, target)


async def transition_status(
    repository: BookingRequestRepository,
    request_id: str,
    target: RequestStatus,
    *,
    delay: float | None = None,
    enforce_pending: bool | None = None,
) -> Any:
    """Approve or reject a booking request after the simulated backend latency.

    Only the addressed request changes. The request is re-read after the
    delay so a decision that landed meanwhile is not silently overwritten.
    """
    if delay is None:
        delay = settings.STATUS_TRANSITION_DELAY_SECONDS
    if enforce_pending is None:
        enforce_pending = settings.ENFORCE_PENDING_TRANSITIONS

    request = repository.get(request_id)
    if request is None:
        raise RequestNotFound(request_id)
    _check_transition(request, request_id, target, enforce_pending)

    await asyncio.sleep(delay)

    request = repository.get(request_id)
    if request is None:
        raise RequestNotFound(request_id)
    _check_transition(request, request_id, target, enforce_pending)
    updated = repository.set_status(request, target)
    logger.info("Booking request %s marked %s", request_id, target.value)
    return updated
