import enum


class RequestStatus(str, enum.Enum):
    """Lifecycle of a booking request on the manager dashboard."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# A request leaves PENDING at most once and never comes back.
TERMINAL_STATUSES = frozenset({RequestStatus.APPROVED, RequestStatus.REJECTED})
