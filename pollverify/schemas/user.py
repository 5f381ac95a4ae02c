from typing import Optional
from pollverify.models.user import UserRole
from pollverify.schemas.base import CamelModel, StoreInt


class UserCreate(CamelModel):
    username: str
    password: str
    full_name: str
    station: Optional[StoreInt] = None
    role: UserRole = UserRole.POLL_WORKER


class UserResponse(CamelModel):
    id: int
    username: str
    full_name: str
    station: Optional[int]
    role: str


class UserRecord(UserResponse):
    """Stored user including the password hash; never sent to clients"""
    password_hash: str
