from . import crud_artist
from . import crud_category
from . import crud_booking_request
from .crud_booking_request import SQLBookingRequestRepository
