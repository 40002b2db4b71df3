from postgrest.exceptions import APIError
import logging
from typing import List, Optional
from dost_admin.common.models.users import AuthUser, User, UserRole, UserStatus
from dost_admin.common.utils.custom_exceptions import NotFoundException
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from supabase import Client
else:
    Client = object

logger = logging.getLogger(__name__)

TABLE_NAME = "users"


class UserRepository:
    def __init__(self, client: Optional[Client]):
        self.client = client

    def get_clients(self) -> List[User]:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("*")
                .eq("role", UserRole.CLIENT.value)
                .order("created_at", desc=True)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving users: {err.message}")
            raise
        return [User.from_row(row) for row in response.data or []]

    def count_clients(self) -> int:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("id")
                .eq("role", UserRole.CLIENT.value)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error counting users: {err.message}")
            raise
        return len(response.data or [])

    def get_admin_by_mail(self, mail: str) -> Optional[AuthUser]:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("id, email, full_name, role")
                .eq("email", mail)
                .eq("role", UserRole.ADMIN.value)
                .limit(1)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving admin by mail {mail}: {err.message}")
            raise

        items = response.data or []
        if not items:
            return None
        return self._to_auth_user(items[0])

    def update_user_status(self, user_id: str, status: UserStatus):
        try:
            response = (
                self.client.table(TABLE_NAME)
                .update({"status": status.value})
                .eq("id", user_id)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error updating user {user_id} status: {err.message}")
            raise
        if not response.data:
            raise NotFoundException("user", user_id)

    def delete_user(self, user_id: str):
        try:
            self.client.table(TABLE_NAME).delete().eq("id", user_id).execute()
        except APIError as err:
            logger.error(f"Error deleting user {user_id}: {err.message}")
            raise

    @staticmethod
    def _to_auth_user(item: dict) -> AuthUser:
        return AuthUser(
            id=str(item["id"]),
            email=item["email"],
            full_name=item.get("full_name") or "",
            role=UserRole(item["role"]),
        )
