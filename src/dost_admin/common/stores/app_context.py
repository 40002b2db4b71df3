from dataclasses import dataclass
from typing import Optional

from dost_admin.common.stores.auth_store import AuthStore
from dost_admin.common.stores.notification_store import NotificationStore
from dost_admin.common.stores.preferences import RememberedEmail


@dataclass
class AppContext:
    """Client-side state shared by every dashboard view.

    Built once at startup with :meth:`create` and handed to whatever needs it.
    """

    auth: AuthStore
    notifications: NotificationStore
    remembered_email: RememberedEmail

    @classmethod
    def create(cls, preferences_file: Optional[str] = None) -> "AppContext":
        return cls(
            auth=AuthStore(),
            notifications=NotificationStore(),
            remembered_email=RememberedEmail(preferences_file),
        )

    def logout(self):
        self.auth.logout()
        self.notifications.clear_history()
