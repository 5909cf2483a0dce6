"""Helpers for account administration."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Optional

from sqlmodel import Session, func, select

from ..core import as_utc, isoformat
from ..models import AuthUser, FocusSession, Profile, SessionMode, Streak, Task, TaskStatus
from .leaderboard import seconds_to_minutes

# About one hundred years.
BAN_DURATION = timedelta(hours=876000)
RECENT_LIMIT = 50


class UserAction(str, Enum):
    ENABLE = "enable"
    DISABLE = "disable"


def is_banned(banned_until: Optional[datetime], now: datetime) -> bool:
    return banned_until is not None and as_utc(banned_until) > as_utc(now)


def apply_user_action(user: AuthUser, action: UserAction, now: datetime) -> AuthUser:
    """Set or clear the ban timestamp. The caller commits."""

    if action is UserAction.DISABLE:
        user.banned_until = as_utc(now + BAN_DURATION)
    elif action is UserAction.ENABLE:
        user.banned_until = None
    else:
        raise ValueError(f"Unsupported action: {action!r}")
    return user


def display_name(user: AuthUser, profile: Optional[Profile]) -> Optional[str]:
    if profile and profile.name:
        return profile.name
    return user.full_name or None


def avatar_url(user: AuthUser, profile: Optional[Profile]) -> Optional[str]:
    if profile and profile.avatar_url:
        return profile.avatar_url
    return user.avatar_url or None


def user_to_dict(user: AuthUser, profile: Optional[Profile], now: datetime) -> Dict[str, Any]:
    """Serialise an account row to the listing shape."""

    return {
        "id": str(user.id),
        "email": user.email or "",
        "name": display_name(user, profile),
        "avatar_url": avatar_url(user, profile),
        "created_at": isoformat(user.created_at),
        "last_sign_in_at": isoformat(user.last_sign_in_at),
        "banned_until": isoformat(user.banned_until),
        "is_banned": is_banned(user.banned_until, now),
    }


def profile_to_dict(profile: Optional[Profile]) -> Optional[Dict[str, Any]]:
    if profile is None:
        return None
    return {
        "id": str(profile.id),
        "name": profile.name,
        "avatar_url": profile.avatar_url,
        "created_at": isoformat(profile.created_at),
        "updated_at": isoformat(profile.updated_at),
    }


def session_to_dict(session: FocusSession) -> Dict[str, Any]:
    return {
        "id": session.id,
        "user_id": session.user_id,
        "task_id": session.task_id,
        "duration": session.duration,
        "mode": session.mode,
        "created_at": isoformat(session.created_at),
    }


def task_to_dict(task: Task) -> Dict[str, Any]:
    return {
        "id": task.id,
        "user_id": task.user_id,
        "title": task.title,
        "status": task.status,
        "created_at": isoformat(task.created_at),
        "updated_at": isoformat(task.updated_at),
    }


def _count(session: Session, query) -> int:
    return session.exec(query).one()


def owned_by(column, user: AuthUser):
    """Match text user ids in any case, with or without hyphens or padding.

    Covers the spellings the leaderboard folds together in ``canonical_user_id``.
    """

    return func.lower(func.replace(func.trim(column), "-", "")) == user.id.hex


def user_activity(session: Session, user: AuthUser) -> Dict[str, Any]:
    """Recent sessions and tasks plus lifetime stats for one account."""

    owns_session = owned_by(FocusSession.user_id, user)
    owns_task = owned_by(Task.user_id, user)

    recent_sessions = session.exec(
        select(FocusSession)
        .where(owns_session)
        .order_by(FocusSession.created_at.desc(), FocusSession.id.desc())
        .limit(RECENT_LIMIT)
    ).all()
    recent_tasks = session.exec(
        select(Task)
        .where(owns_task)
        .order_by(Task.created_at.desc(), Task.id.desc())
        .limit(RECENT_LIMIT)
    ).all()

    total_sessions = _count(
        session,
        select(func.count()).select_from(FocusSession).where(owns_session),
    )
    total_tasks = _count(
        session, select(func.count()).select_from(Task).where(owns_task)
    )
    tasks_completed = _count(
        session,
        select(func.count())
        .select_from(Task)
        .where(owns_task)
        .where(Task.status == TaskStatus.DONE.value),
    )
    focus_seconds = session.exec(
        select(func.coalesce(func.sum(FocusSession.duration), 0))
        .where(owns_session)
        .where(FocusSession.mode == SessionMode.WORK.value)
    ).one()
    streak = session.exec(select(Streak).where(Streak.user_id == user.id)).first()

    return {
        "stats": {
            "total_sessions": total_sessions,
            "total_tasks": total_tasks,
            "tasks_completed": tasks_completed,
            "current_streak": streak.current if streak else 0,
            "longest_streak": streak.longest if streak else 0,
            "total_focus_minutes": seconds_to_minutes(focus_seconds),
        },
        "sessions": [session_to_dict(item) for item in recent_sessions],
        "tasks": [task_to_dict(item) for item in recent_tasks],
    }


__all__ = [
    "BAN_DURATION",
    "RECENT_LIMIT",
    "UserAction",
    "apply_user_action",
    "avatar_url",
    "display_name",
    "is_banned",
    "owned_by",
    "profile_to_dict",
    "session_to_dict",
    "task_to_dict",
    "user_activity",
    "user_to_dict",
]
