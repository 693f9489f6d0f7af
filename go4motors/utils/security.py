# go4motors/utils/security.py
"""
Password hashing (passlib) and signed session tokens (python-jose).
Token payload: sub (user id), email, role, exp.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel

from go4motors.config import settings
from go4motors.errors import UnauthorizedError
from go4motors.utils.i18n import get_lang

pwd_context = CryptContext(schemes=[settings.PASSWORD_HASH_SCHEME], deprecated="auto")

# auto_error=False so a missing header goes through our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)


class TokenData(BaseModel):
    """Claims extracted from a valid session token."""
    id: str
    email: Optional[str] = None
    role: Optional[str] = None


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time comparison of a plain password against its stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def generate_one_time_token() -> str:
    """Opaque single-use token for email verification and password reset."""
    return str(uuid.uuid4())


def create_access_token(user_id: str, email: str, role: str,
                        expires_minutes: Optional[int] = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode = {"sub": str(user_id), "email": email, "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, lang: Optional[str] = None) -> TokenData:
    """Verify signature and expiry. Raises UnauthorizedError otherwise."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise UnauthorizedError("auth.TOKEN_EXPIRED", lang)
    except JWTError:
        raise UnauthorizedError("auth.INVALID_TOKEN", lang)

    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedError("auth.INVALID_TOKEN", lang)
    return TokenData(id=subject, email=payload.get("email"), role=payload.get("role"))


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    lang: str = Depends(get_lang),
) -> TokenData:
    """FastAPI dependency for routes that require a Bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("auth.NOT_AUTHENTICATED", lang)
    return decode_access_token(credentials.credentials, lang)
