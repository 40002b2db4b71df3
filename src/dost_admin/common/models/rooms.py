from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field


class RoomType(str, Enum):
    SINGLE = "Single"
    DOUBLE = "Double"
    SUITE = "Suite"
    DELUXE = "Deluxe"


class RoomStatus(str, Enum):
    AVAILABLE = "Available"
    BOOKED = "Booked"
    MAINTENANCE = "Maintenance"


@dataclass
class Room:
    id: str
    roomname: str
    roomtype: RoomType
    price: float
    capacity: int
    status: RoomStatus = RoomStatus.AVAILABLE
    amenities: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "Room":
        return cls(
            id=str(row["id"]),
            roomname=row["roomname"],
            roomtype=RoomType(row["roomtype"]),
            price=float(row.get("price") or 0),
            capacity=int(row.get("capacity") or 1),
            status=RoomStatus(row.get("status", RoomStatus.AVAILABLE.value)),
            amenities=list(row.get("amenities") or []),
            images=list(row.get("images") or []),
            created_at=row.get("created_at"),
        )
