# go4motors/schemas/auth.py
import re
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from go4motors.schemas.common import CamelModel

PASSWORD_MIN_LENGTH = 8
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT_OR_SYMBOL = re.compile(r"[\d\W_]")


def check_password_strength(password: str) -> str:
    """
    Minimum 8 characters, with an uppercase letter, a lowercase letter and a
    digit or symbol. Error messages are catalogue keys, translated at the boundary.
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValueError("common.PASSWORD_TOO_SHORT")
    if not (_UPPER.search(password) and _LOWER.search(password) and _DIGIT_OR_SYMBOL.search(password)):
        raise ValueError("common.PASSWORD_TOO_WEAK")
    return password


class SignupRequest(CamelModel):
    email: EmailStr
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    password: str
    preferred_language: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_policy(cls, v):
        return check_password_strength(v)


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    password: str

    @field_validator("password")
    @classmethod
    def password_policy(cls, v):
        return check_password_strength(v)


class UserPublic(CamelModel):
    """What auth responses expose about an account, never hashes or tokens."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: str               # localized role label
    preferred_language: str
    is_verified: bool


class UserProfile(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str]
    role: str               # role name
    is_verified: bool
    preferred_language: str


class AuthResponse(CamelModel):
    message: str
    user: UserPublic
    token: Optional[str] = None
