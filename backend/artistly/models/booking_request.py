from sqlalchemy import Column, Date, JSON, String
from sqlalchemy import Enum as SAEnum

from .base import BaseModel
from .request_status import RequestStatus


class BookingRequest(BaseModel):
    """A request to book an artist, triaged from the manager dashboard.

    ``status`` is the only field that changes after creation.
    """

    __tablename__ = "booking_requests"

    id = Column(String, primary_key=True, index=True)
    artist_name = Column(String, nullable=False)
    category = Column(JSON, nullable=False, default=list)
    location = Column(String, nullable=False)
    fee_range = Column(String, nullable=False)
    status = Column(
        SAEnum(
            RequestStatus,
            name="requeststatus",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=RequestStatus.PENDING,
        index=True,
    )
    request_date = Column(Date, nullable=False)
