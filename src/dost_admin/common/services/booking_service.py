from typing import List, Tuple

from dost_admin.common.models.bookings import Booking, BookingStatus
from dost_admin.common.models.results import Result
from dost_admin.common.repository import fallback_data
from dost_admin.common.repository.booking_repo import BookingRepository
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.datetime_normaliser import most_recent_first
from dost_admin.common.utils.fallback import remote_read, remote_write

TRANSITIONS = {
    BookingStatus.PENDING: (BookingStatus.APPROVED, BookingStatus.CANCELLED),
    BookingStatus.APPROVED: (BookingStatus.CANCELLED,),
}


def _fallback_bookings(self) -> List[Booking]:
    return most_recent_first(fallback_data.bookings())


def _fallback_recent(self, limit: int) -> List[Booking]:
    return _fallback_bookings(self)[: max(limit, 0)]


class BookingService:
    def __init__(self, booking_repo: BookingRepository, settings: SupabaseSettings):
        self.booking_repo = booking_repo
        self.settings = settings

    @remote_read(_fallback_bookings)
    def get_all_bookings(self) -> List[Booking]:
        return self.booking_repo.get_bookings()

    @remote_read(_fallback_recent)
    def get_recent_bookings(self, limit: int) -> List[Booking]:
        if limit <= 0:
            return []
        return self.booking_repo.get_bookings(limit=limit)

    @remote_write
    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Result:
        """Set booking_status. Callers only offer ``allowed_transitions``."""
        self.booking_repo.update_booking_status(booking_id, status)
        return Result()

    @staticmethod
    def allowed_transitions(status: BookingStatus) -> Tuple[BookingStatus, ...]:
        return TRANSITIONS.get(BookingStatus(status), ())
