"""Read access to activity tables for the leaderboard and dashboard."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from fastapi import Depends
from sqlmodel import Session, func, select

from ..core import as_utc, get_session
from ..models import AuthUser, FocusSession, Profile, SessionMode, Streak, Task, TaskStatus


class ActivityStore:
    """Thin query layer over one database session.

    ``since`` arguments are timezone-aware lower bounds (inclusive) or None
    for an unbounded window. Tests swap this class for an in-memory fake with
    the same methods.
    """

    def __init__(self, session: Session):
        self.session = session

    def work_sessions(self, since: Optional[datetime] = None) -> Sequence[FocusSession]:
        query = select(FocusSession).where(FocusSession.mode == SessionMode.WORK.value)
        if since is not None:
            query = query.where(FocusSession.created_at >= as_utc(since))
        return self.session.exec(query.order_by(FocusSession.id)).all()

    def completed_tasks(self, since: Optional[datetime] = None) -> Sequence[Task]:
        query = select(Task).where(Task.status == TaskStatus.DONE.value)
        if since is not None:
            query = query.where(Task.updated_at >= as_utc(since))
        return self.session.exec(query.order_by(Task.id)).all()

    def streaks(self) -> Sequence[Streak]:
        return self.session.exec(select(Streak).order_by(Streak.id)).all()

    def profiles(self) -> Sequence[Profile]:
        return self.session.exec(select(Profile)).all()

    # Dashboard counters ----------------------------------------------------

    def count_users(self) -> int:
        return self.session.exec(select(func.count()).select_from(AuthUser)).one()

    def count_banned_users(self, now: datetime) -> int:
        query = (
            select(func.count())
            .select_from(AuthUser)
            .where(AuthUser.banned_until > as_utc(now))
        )
        return self.session.exec(query).one()

    def count_users_created_since(self, since: datetime) -> int:
        query = (
            select(func.count())
            .select_from(AuthUser)
            .where(AuthUser.created_at >= as_utc(since))
        )
        return self.session.exec(query).one()

    def total_work_seconds(self) -> int:
        query = select(func.coalesce(func.sum(FocusSession.duration), 0)).where(
            FocusSession.mode == SessionMode.WORK.value
        )
        return int(self.session.exec(query).one())

    def count_completed_tasks(self) -> int:
        query = (
            select(func.count())
            .select_from(Task)
            .where(Task.status == TaskStatus.DONE.value)
        )
        return self.session.exec(query).one()

    def active_streak_values(self) -> List[int]:
        query = select(Streak.current).where(Streak.current > 0)
        return list(self.session.exec(query).all())


def get_activity_store(session: Session = Depends(get_session)) -> ActivityStore:
    """FastAPI dependency building a store bound to the request's session."""

    return ActivityStore(session)


__all__ = ["ActivityStore", "get_activity_store"]
