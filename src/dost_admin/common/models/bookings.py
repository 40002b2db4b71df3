from enum import Enum
from dataclasses import dataclass
from typing import Optional
from dost_admin.common.models.rooms import Room
from dost_admin.common.models.users import User


class BookingStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class BookingPaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    FAILED = "Failed"


@dataclass
class Booking:
    id: str
    user_id: str
    room_id: str
    check_in: str
    check_out: str
    total_price: float
    booking_status: BookingStatus
    payment_status: BookingPaymentStatus
    created_at: str

    user: Optional[User] = None
    room: Optional[Room] = None

    @classmethod
    def from_row(cls, row: dict) -> "Booking":
        user = row.get("user")
        room = row.get("room")
        return cls(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            room_id=str(row["room_id"]),
            check_in=row["check_in"],
            check_out=row["check_out"],
            total_price=float(row.get("total_price") or 0),
            booking_status=BookingStatus(row["booking_status"]),
            payment_status=BookingPaymentStatus(row["payment_status"]),
            created_at=row.get("created_at") or "",
            user=User.from_row(user) if user else None,
            room=Room.from_row(room) if room else None,
        )
