"""Database models for focus sessions, tasks and streaks."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class SessionMode(str, Enum):
    WORK = "work"
    SHORT_BREAK = "short-break"
    LONG_BREAK = "long-break"


class TaskStatus(str, Enum):
    TODO = "todo"
    DOING = "doing"
    DONE = "done"


class FocusSession(SQLModel, table=True):
    """A single timer run. ``duration`` is in seconds."""

    __tablename__ = "sessions"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    # Stored as text by the mobile clients, not as a UUID column.
    user_id: str = ORMField(index=True)
    task_id: Optional[int] = None
    duration: int = 0
    mode: str = ORMField(default=SessionMode.WORK.value, index=True)
    created_at: datetime = ORMField(default_factory=utcnow, index=True)


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: str = ORMField(index=True)
    title: str = ""
    status: str = ORMField(default=TaskStatus.TODO.value, index=True)
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow, index=True)


class Streak(SQLModel, table=True):
    """Consecutive-activity counter, one row per user."""

    __tablename__ = "streaks"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: uuid.UUID = ORMField(index=True, unique=True)
    current: int = 0
    longest: int = 0


__all__ = ["FocusSession", "SessionMode", "Streak", "Task", "TaskStatus"]
