"""Database model for in-app feedback submissions."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class FeedbackType(str, Enum):
    FEATURE = "feature"
    BUG = "bug"
    QUESTION = "question"
    OTHER = "other"


class Feedback(SQLModel, table=True):
    """Message sent from the app; ``user_id`` is empty for anonymous senders."""

    __tablename__ = "feedbacks"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: Optional[uuid.UUID] = ORMField(default=None, index=True)
    name: Optional[str] = None
    email: Optional[str] = None
    type: str = ORMField(default=FeedbackType.OTHER.value, index=True)
    message: str = ""
    created_at: datetime = ORMField(default_factory=utcnow, index=True)


__all__ = ["Feedback", "FeedbackType"]
