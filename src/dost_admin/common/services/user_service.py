from typing import List

from dost_admin.common.models.results import Result
from dost_admin.common.models.users import User, UserStatus
from dost_admin.common.repository import fallback_data
from dost_admin.common.repository.user_repo import UserRepository
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.datetime_normaliser import most_recent_first
from dost_admin.common.utils.fallback import remote_read, remote_write


def _fallback_users(self) -> List[User]:
    return most_recent_first(fallback_data.users())


class UserService:
    def __init__(self, user_repo: UserRepository, settings: SupabaseSettings):
        self.user_repo = user_repo
        self.settings = settings

    @remote_read(_fallback_users)
    def get_all_users(self) -> List[User]:
        return self.user_repo.get_clients()

    @remote_write
    def update_user_status(self, user_id: str, status: UserStatus) -> Result:
        self.user_repo.update_user_status(user_id, status)
        return Result()

    @remote_write
    def delete_user(self, user_id: str) -> Result:
        self.user_repo.delete_user(user_id)
        return Result()
