# go4motors/models/mixins.py
"""Columns and defaults shared by the marketplace tables."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String


def new_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp; every DateTime column in the schema is stored as UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class UUIDPrimaryKeyMixin:
    id = Column(String(36), primary_key=True, default=new_uuid)


class TimestampMixin:
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
