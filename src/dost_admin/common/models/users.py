from enum import Enum
from dataclasses import dataclass
from typing import Optional


class UserRole(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"
    CLIENT = "client"


class UserStatus(str, Enum):
    ACTIVE = "Active"
    BLOCKED = "Blocked"


@dataclass
class User:
    id: str
    email: str
    full_name: str
    role: UserRole
    status: UserStatus
    created_at: str
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    total_bookings: Optional[int] = None
    total_spent: Optional[float] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        return cls(
            id=str(row["id"]),
            email=row["email"],
            full_name=row.get("full_name") or "",
            role=UserRole(row.get("role", UserRole.CLIENT.value)),
            status=UserStatus(row.get("status", UserStatus.ACTIVE.value)),
            created_at=row.get("created_at") or "",
            phone=row.get("phone"),
            avatar_url=row.get("avatar_url"),
            total_bookings=row.get("total_bookings"),
            total_spent=row.get("total_spent"),
        )


@dataclass
class AuthUser:
    """The projection of an admin account kept by the auth store."""

    id: str
    email: str
    full_name: str
    role: UserRole = UserRole.ADMIN
