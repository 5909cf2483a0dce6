"""Aggregate counters and the 7-day activity series for the dashboard."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, time, timedelta
from typing import Any, Dict, List, Optional

from ..core import as_utc, local_now
from .leaderboard import seconds_to_minutes

ACTIVITY_DAYS = 7


def activity_series(sessions: Any, now: datetime, days: int = ACTIVITY_DAYS) -> List[Dict[str, Any]]:
    """Count sessions per local calendar day, oldest first, zero-filled."""

    tz = now.tzinfo
    today = now.date()
    keys = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    counts: Counter = Counter()
    for session in sessions:
        counts[as_utc(session.created_at).astimezone(tz).date()] += 1
    return [{"date": day.isoformat(), "sessions": counts.get(day, 0)} for day in keys]


def compute_dashboard(store: Any, now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or local_now()
    week_ago = now - timedelta(days=ACTIVITY_DAYS)
    chart_start = datetime.combine(
        now.date() - timedelta(days=ACTIVITY_DAYS - 1), time.min, tzinfo=now.tzinfo
    )

    total_users = store.count_users()
    banned_users = store.count_banned_users(now)
    streak_values = store.active_streak_values()

    stats = {
        "totalUsers": total_users,
        "activeUsers": total_users - banned_users,
        "newUsersThisWeek": store.count_users_created_since(week_ago),
        "totalFocusMinutes": seconds_to_minutes(store.total_work_seconds()),
        "totalTasksCompleted": store.count_completed_tasks(),
        "activeStreaks": len(streak_values),
        "longestStreak": max(streak_values, default=0),
    }
    return {
        "stats": stats,
        "activityChart": activity_series(store.work_sessions(chart_start), now),
    }


__all__ = ["ACTIVITY_DAYS", "activity_series", "compute_dashboard"]
