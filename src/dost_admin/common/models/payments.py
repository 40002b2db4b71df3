from enum import Enum
from dataclasses import dataclass
from typing import Optional
from dost_admin.common.models.rooms import Room
from dost_admin.common.models.users import User


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    FAILED = "Failed"
    REFUNDED = "Refunded"


class PaymentMethod(str, Enum):
    UPI = "UPI"
    CARD = "Card"
    CASH = "Cash"
    NET_BANKING = "Net Banking"


@dataclass
class Payment:
    id: str
    booking_id: str
    user_id: str
    room_id: str
    amount: float
    transaction_id: str
    payment_status: PaymentStatus
    payment_method: PaymentMethod
    created_at: str

    user: Optional[User] = None
    room: Optional[Room] = None

    @classmethod
    def from_row(cls, row: dict) -> "Payment":
        user = row.get("user")
        room = row.get("room")
        return cls(
            id=str(row["id"]),
            booking_id=str(row["booking_id"]),
            user_id=str(row["user_id"]),
            room_id=str(row["room_id"]),
            amount=float(row.get("amount") or 0),
            transaction_id=row["transaction_id"],
            payment_status=PaymentStatus(row["payment_status"]),
            payment_method=PaymentMethod(row["payment_method"]),
            created_at=row.get("created_at") or "",
            user=User.from_row(user) if user else None,
            room=Room.from_row(room) if room else None,
        )
