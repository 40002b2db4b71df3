from typing import Optional

from dost_admin.common.models.users import AuthUser
from dost_admin.common.stores.base import Store


class AuthStore(Store):
    def __init__(self):
        super().__init__()
        self.user: Optional[AuthUser] = None
        # gates rendering until startup completes
        self.is_loading = True

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def set_user(self, user: Optional[AuthUser]):
        self.user = user
        self._notify()

    def set_loading(self, loading: bool):
        self.is_loading = loading
        self._notify()

    def logout(self):
        self.user = None
        self.is_loading = False
        self._notify()
