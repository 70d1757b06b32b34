from .artist import ArtistBase, ArtistResponse, ArtistListResponse
from .category import CategoryResponse
from .booking_request import (
    BookingRequestResponse,
    BookingRequestDetails,
    BookingRequestStats,
    StatusFilter,
)
from .onboarding import ArtistFormData, WizardState, ValidationResult, SubmissionReceipt

__all__ = [
    "ArtistBase",
    "ArtistResponse",
    "ArtistListResponse",
    "CategoryResponse",
    "BookingRequestResponse",
    "BookingRequestDetails",
    "BookingRequestStats",
    "StatusFilter",
    "ArtistFormData",
    "WizardState",
    "ValidationResult",
    "SubmissionReceipt",
]
