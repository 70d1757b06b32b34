from datetime import date
from typing import List, Literal

from pydantic import BaseModel

from ..models.request_status import RequestStatus

# "all" disables the status predicate on the dashboard list
StatusFilter = Literal["all", "pending", "approved", "rejected"]


class BookingRequestResponse(BaseModel):
    id: str
    artist_name: str
    category: List[str]
    location: str
    fee_range: str
    status: RequestStatus
    request_date: date

    model_config = {"from_attributes": True}


class BookingRequestDetails(BaseModel):
    """Read-only summary shown by the dashboard's "view details" action."""

    id: str
    artist_name: str
    category: str
    location: str
    fee_range: str
    status: RequestStatus
    request_date: str


class BookingRequestStats(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int
