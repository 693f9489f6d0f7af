# go4motors/schemas/user.py
from datetime import datetime
from typing import Optional

from go4motors.schemas.common import CamelModel


class RoleOut(CamelModel):
    id: int
    name: str


class UserOut(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    is_verified: bool
    preferred_language: str
    role: RoleOut
    created_at: datetime


class RoleUpdate(CamelModel):
    role: str


class UserResponse(CamelModel):
    message: str
    user: UserOut
