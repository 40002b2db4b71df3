import logging
from typing import Optional

from dost_admin.common.models.results import ErrorKind, Result
from dost_admin.common.models.users import AuthUser, UserRole
from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import (
    DEMO_ADMIN_EMAIL,
    DEMO_ADMIN_ID,
    DEMO_ADMIN_NAME,
)
from dost_admin.common.utils.supabase_client import describe_error

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid login credentials"


class AuthService:
    def __init__(self, user_repo: UserRepository, settings: SupabaseSettings):
        self.user_repo = user_repo
        self.settings = settings

    def sign_in(self, email: str, password: Optional[str] = None) -> Result:
        """Resolve an admin account by email.

        The password is accepted for interface compatibility only; admin
        eligibility is decided by the ``role`` column.
        """
        email = email.strip()
        if not self.settings.configured:
            return self._demo_sign_in(email)
        try:
            user = self.user_repo.get_admin_by_mail(email)
        except Exception as err:
            message = describe_error(err)
            logger.error(f"Sign-in lookup for {email} failed: {message}")
            return Result.failure(message)
        if user is None:
            return self._invalid_credentials()
        return Result(data=user)

    def _demo_sign_in(self, email: str) -> Result:
        if email.lower() != DEMO_ADMIN_EMAIL:
            logger.info(f"Demo sign-in rejected for {email}")
            return self._invalid_credentials()
        return Result(
            data=AuthUser(
                id=DEMO_ADMIN_ID,
                email=email,
                full_name=DEMO_ADMIN_NAME,
                role=UserRole.ADMIN,
            )
        )

    @staticmethod
    def _invalid_credentials() -> Result:
        return Result.failure(INVALID_CREDENTIALS_MESSAGE, ErrorKind.INVALID_CREDENTIALS)
