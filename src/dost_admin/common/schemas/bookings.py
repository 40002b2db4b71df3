from pydantic import BaseModel
from dost_admin.common.models.bookings import BookingStatus


class BookingStatusRequest(BaseModel):
    status: BookingStatus
