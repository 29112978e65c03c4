"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""
    pass


def generate_uuid() -> str:
    """Generate a string UUID4 used as primary key"""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)
