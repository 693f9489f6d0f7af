# go4motors/models/user.py
"""
Accounts and roles.
A user is created unverified at signup; verification_token is cleared once used,
reset_password_token / reset_password_expires_at are single-use and time-boxed.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from go4motors.config import settings
from go4motors.database import Base
from go4motors.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

DEFAULT_ROLE = "client"
KNOWN_ROLES = ("client", "admin", "seller")


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False, index=True)

    users = relationship("User", back_populates="role")

    def __repr__(self):
        return f"<Role {self.name}>"


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "users"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(50), unique=True, nullable=True)
    password = Column(String(255), nullable=False)   # passlib hash, never plain text
    preferred_language = Column(String(5), nullable=False, default=lambda: settings.SIGNUP_DEFAULT_LANGUAGE)
    is_verified = Column(Boolean, default=False, nullable=False)
    verification_token = Column(String(64), index=True)
    reset_password_token = Column(String(64), index=True)
    reset_password_expires_at = Column(DateTime)

    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    role = relationship("Role", back_populates="users")
    transactions = relationship("Transaction", back_populates="user")

    def __repr__(self):
        return f"<User {self.email} verified={self.is_verified}>"
