from enum import Enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    DEMO_MODE = "DEMO_MODE"
    REMOTE = "REMOTE"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_STATE = "INVALID_STATE"
    NOT_FOUND = "NOT_FOUND"


DEMO_MODE_MESSAGE = (
    "Demo mode: cannot perform this action without Supabase configuration."
)


@dataclass
class ServiceError:
    message: str
    kind: ErrorKind = ErrorKind.REMOTE

    @classmethod
    def demo_mode(cls) -> "ServiceError":
        return cls(message=DEMO_MODE_MESSAGE, kind=ErrorKind.DEMO_MODE)


@dataclass
class Result(Generic[T]):
    """Outcome of a write. Callers check ``error`` before trusting ``data``."""

    data: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str, kind: ErrorKind = ErrorKind.REMOTE) -> "Result":
        return cls(error=ServiceError(message=message, kind=kind))
