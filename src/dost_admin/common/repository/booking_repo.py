from postgrest.exceptions import APIError
import logging
from typing import List, Optional
from dost_admin.common.models.bookings import Booking, BookingStatus
from dost_admin.common.utils.custom_exceptions import NotFoundException
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from supabase import Client
else:
    Client = object


logger = logging.getLogger(__name__)

TABLE_NAME = "bookings"
BOOKING_SELECT = "*, user:users(*), room:rooms(*)"


class BookingRepository:
    def __init__(self, client: Optional[Client]):
        self.client = client

    def get_bookings(self, limit: Optional[int] = None) -> List[Booking]:
        query = (
            self.client.table(TABLE_NAME)
            .select(BOOKING_SELECT)
            .order("created_at", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        try:
            response = query.execute()
        except APIError as err:
            logger.error(f"Error retrieving bookings: {err.message}")
            raise
        return [Booking.from_row(row) for row in response.data or []]

    def get_booking_summaries(self) -> List[dict]:
        """booking_status and created_at of every booking, for aggregates."""
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("booking_status, created_at")
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving booking summaries: {err.message}")
            raise
        return response.data or []

    def update_booking_status(self, booking_id: str, status: BookingStatus):
        try:
            response = (
                self.client.table(TABLE_NAME)
                .update({"booking_status": status.value})
                .eq("id", booking_id)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error updating booking {booking_id} status: {err.message}")
            raise
        if not response.data:
            raise NotFoundException("booking", booking_id)
