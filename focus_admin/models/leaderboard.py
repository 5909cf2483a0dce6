"""Leaderboard value types. Nothing here is persisted."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from sqlmodel import SQLModel


class Period(str, Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


class Metric(str, Enum):
    FOCUS_TIME = "focus_time"
    TASKS = "tasks"
    STREAK = "streak"


class LeaderboardEntry(SQLModel):
    """One ranked user, built fresh for every query."""

    user_id: str
    display_name: Optional[str] = None
    avatar: Optional[str] = None
    focus_minutes: int = 0
    tasks_completed: int = 0
    current_streak: int = 0
    rank: int = 0


class LeaderboardPage(SQLModel):
    entries: List[LeaderboardEntry]
    total: int
    period: Period
    metric: Metric
    offset: int = 0
    limit: int = 100


__all__ = ["LeaderboardEntry", "LeaderboardPage", "Metric", "Period"]
