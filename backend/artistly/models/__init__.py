from .artist import Artist
from .category import Category
from .booking_request import BookingRequest
from .request_status import RequestStatus, TERMINAL_STATUSES

__all__ = [
    "Artist",
    "Category",
    "BookingRequest",
    "RequestStatus",
    "TERMINAL_STATUSES",
]
