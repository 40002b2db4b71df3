import time
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List

from dost_admin.common.models.notifications import Notification, NotificationType
from dost_admin.common.stores.base import Store
from dost_admin.common.utils.constants import HISTORY_LIMIT, TOAST_TIMEOUT_SECONDS


class NotificationStore(Store):
    """Toasts shown to the admin plus a bounded history of past notifications.

    A toast disappears ``toast_timeout`` seconds after it was added, or when
    dismissed. Expiry is applied whenever ``toasts`` is read or a toast is
    added. History entries outlive their toast and are only changed by
    ``mark_as_read`` and ``clear_history``.
    """

    def __init__(
        self,
        toast_timeout: float = TOAST_TIMEOUT_SECONDS,
        history_limit: int = HISTORY_LIMIT,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        self.toast_timeout = toast_timeout
        self.history_limit = history_limit
        self.clock = clock
        self._toasts: List[Notification] = []
        self._history: List[Notification] = []
        self._expires_at: Dict[str, float] = {}

    @property
    def toasts(self) -> List[Notification]:
        self._expire_toasts()
        return list(self._toasts)

    @property
    def history(self) -> List[Notification]:
        return list(self._history)

    @property
    def unread_count(self) -> int:
        return len([n for n in self._history if not n.is_read])

    def add_notification(
        self, title: str, message: str, type: NotificationType = NotificationType.INFO
    ) -> Notification:
        notification = Notification(
            id=uuid.uuid4().hex[:9],
            title=title,
            message=message,
            type=NotificationType(type),
            timestamp=datetime.now().strftime("%I:%M:%S %p"),
        )
        self._expire_toasts()
        self._toasts.append(notification)
        self._history = [notification] + self._history[: self.history_limit - 1]
        self._expires_at[notification.id] = self.clock() + self.toast_timeout
        self._notify()
        return notification

    def remove_toast(self, notification_id: str):
        self._expires_at.pop(notification_id, None)
        self._toasts = [t for t in self._toasts if t.id != notification_id]
        self._notify()

    def mark_as_read(self, notification_id: str):
        # replace rather than mutate, the toast shares the original instance
        self._history = [
            replace(n, is_read=True) if n.id == notification_id else n
            for n in self._history
        ]
        self._notify()

    def clear_history(self):
        self._history = []
        self._notify()

    def _expire_toasts(self):
        now = self.clock()
        expired = {i for i, deadline in self._expires_at.items() if deadline <= now}
        if not expired:
            return
        for notification_id in expired:
            del self._expires_at[notification_id]
        self._toasts = [t for t in self._toasts if t.id not in expired]
        self._notify()
