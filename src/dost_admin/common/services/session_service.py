import logging
from typing import Optional

from dost_admin.common.models.notifications import NotificationType
from dost_admin.common.models.results import Result
from dost_admin.common.services.auth_service import AuthService
from dost_admin.common.stores.app_context import AppContext

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, auth_service: AuthService, context: AppContext):
        self.auth_service = auth_service
        self.context = context

    def sign_in(
        self, email: str, password: Optional[str] = None, remember_me: bool = False
    ) -> Result:
        result = self.auth_service.sign_in(email, password)
        if not result.ok:
            return result

        user = result.data
        if remember_me:
            self.context.remembered_email.remember(email.strip())
        else:
            self.context.remembered_email.forget()

        self.context.auth.set_user(user)
        self.context.auth.set_loading(False)
        self.context.notifications.add_notification(
            title="Welcome Back",
            message=f"Successfully logged in as {user.full_name or 'Admin'}.",
            type=NotificationType.SUCCESS,
        )
        logger.info(f"Admin {user.email} signed in")
        return result

    def sign_out(self):
        user = self.context.auth.user
        self.context.logout()
        if user:
            logger.info(f"Admin {user.email} signed out")
