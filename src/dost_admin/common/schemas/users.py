from typing import Optional
from pydantic import BaseModel, EmailStr
from dost_admin.common.models.users import UserStatus


class LoginRequest(BaseModel):
    email: EmailStr
    password: Optional[str] = None
    remember_me: bool = False


class UserStatusRequest(BaseModel):
    status: UserStatus
