from enum import Enum
from dataclasses import dataclass


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass
class Notification:
    id: str
    title: str
    message: str
    type: NotificationType
    timestamp: str
    is_read: bool = False
