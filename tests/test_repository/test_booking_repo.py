import unittest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from dost_admin.common.repository.booking_repo import BookingRepository, BOOKING_SELECT
from dost_admin.common.models.bookings import BookingPaymentStatus, BookingStatus
from dost_admin.common.utils.custom_exceptions import NotFoundException


BOOKING_ROW = {
    "id": "b1",
    "user_id": "u1",
    "room_id": "r1",
    "check_in": "2024-02-01",
    "check_out": "2024-02-03",
    "total_price": 3000,
    "booking_status": "Pending",
    "payment_status": "Pending",
    "created_at": "2024-01-20T08:00:00+00:00",
    "user": {
        "id": "u1",
        "email": "rahul@example.com",
        "full_name": "Rahul Sharma",
        "role": "client",
        "status": "Active",
        "created_at": "2023-01-15",
    },
    "room": {
        "id": "r1",
        "roomname": "Superior Room 101",
        "roomtype": "Single",
        "price": 1500,
        "capacity": 1,
        "status": "Booked",
    },
}


class TestBookingRepository(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.table = self.client.table.return_value
        self.repo = BookingRepository(self.client)
        self.ordered = self.table.select.return_value.order.return_value

    def test_get_bookings_joins_user_and_room(self):
        self.ordered.execute.return_value = MagicMock(data=[BOOKING_ROW])

        bookings = self.repo.get_bookings()

        self.client.table.assert_called_once_with("bookings")
        self.table.select.assert_called_once_with(BOOKING_SELECT)
        self.ordered.limit.assert_not_called()
        booking = bookings[0]
        self.assertEqual(booking.booking_status, BookingStatus.PENDING)
        self.assertEqual(booking.payment_status, BookingPaymentStatus.PENDING)
        self.assertEqual(booking.user.full_name, "Rahul Sharma")
        self.assertEqual(booking.room.roomname, "Superior Room 101")

    def test_get_bookings_without_join_rows(self):
        row = {k: v for k, v in BOOKING_ROW.items() if k not in ("user", "room")}
        self.ordered.execute.return_value = MagicMock(data=[row])

        booking = self.repo.get_bookings()[0]

        self.assertIsNone(booking.user)
        self.assertIsNone(booking.room)

    def test_get_bookings_with_limit(self):
        self.ordered.limit.return_value.execute.return_value = MagicMock(data=[BOOKING_ROW])

        bookings = self.repo.get_bookings(limit=5)

        self.ordered.limit.assert_called_once_with(5)
        self.assertEqual(len(bookings), 1)

    def test_get_bookings_api_error(self):
        self.ordered.execute.side_effect = APIError({"message": "down"})

        with self.assertRaises(APIError):
            self.repo.get_bookings()

    def test_get_booking_summaries(self):
        rows = [{"booking_status": "Approved", "created_at": "2024-01-01"}]
        self.table.select.return_value.execute.return_value = MagicMock(data=rows)

        self.assertEqual(self.repo.get_booking_summaries(), rows)
        self.table.select.assert_called_once_with("booking_status, created_at")

    def test_update_booking_status_success(self):
        self.table.update.return_value.eq.return_value.execute.return_value = MagicMock(
            data=[{**BOOKING_ROW, "booking_status": "Approved"}]
        )

        self.repo.update_booking_status("b1", BookingStatus.APPROVED)

        self.table.update.assert_called_once_with({"booking_status": "Approved"})
        self.table.update.return_value.eq.assert_called_once_with("id", "b1")

    def test_update_booking_status_not_found(self):
        self.table.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[])

        with self.assertRaises(NotFoundException):
            self.repo.update_booking_status("missing", BookingStatus.CANCELLED)

    def test_update_booking_status_api_error(self):
        self.table.update.return_value.eq.return_value.execute.side_effect = APIError(
            {"message": "denied"}
        )

        with self.assertRaises(APIError):
            self.repo.update_booking_status("b1", BookingStatus.CANCELLED)


if __name__ == "__main__":
    unittest.main()
