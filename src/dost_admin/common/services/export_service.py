import csv
import io
from typing import List

from dost_admin.common.models.bookings import Booking
from dost_admin.common.utils.constants import BOOKINGS_CSV_HEADER

BOOKINGS_EXPORT_FILENAME = "bookings_export.csv"


def _amount(value: float):
    return int(value) if float(value).is_integer() else value


def bookings_to_csv(bookings: List[Booking]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(BOOKINGS_CSV_HEADER)
    for b in bookings:
        writer.writerow(
            [
                b.id,
                b.user.full_name if b.user else "",
                b.room.roomname if b.room else "",
                b.check_in,
                b.check_out,
                _amount(b.total_price),
                b.booking_status.value,
                b.payment_status.value,
            ]
        )
    return buffer.getvalue()
