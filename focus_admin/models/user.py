"""Database models for application accounts and their profiles."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class AuthUser(SQLModel, table=True):
    """Account record owned by the identity provider.

    ``banned_until`` in the future means the account is disabled.
    """

    __tablename__ = "auth_user"

    id: uuid.UUID = ORMField(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    email: str = ORMField(index=True, unique=True)
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow, index=True)
    last_sign_in_at: Optional[datetime] = None
    banned_until: Optional[datetime] = None


class Profile(SQLModel, table=True):
    """Public profile; shares its primary key with ``AuthUser``."""

    __tablename__ = "profiles"

    id: uuid.UUID = ORMField(primary_key=True, nullable=False)
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["AuthUser", "Profile"]
