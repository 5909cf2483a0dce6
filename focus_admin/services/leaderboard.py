"""Leaderboard aggregation and ranking.

Raw focus sessions, completed tasks and streak rows are grouped per user,
merged into ``LeaderboardEntry`` objects, sorted by the selected metric and
ranked with standard competition ranking ("1224"): tied values share a rank
and the next distinct value takes its 1-based position.
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from datetime import datetime, time, timedelta
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core import app_timezone, local_now
from ..models import LeaderboardEntry, LeaderboardPage, Metric, Period, Profile

logger = logging.getLogger(__name__)

_METRIC_FIELDS = {
    Metric.FOCUS_TIME: "focus_minutes",
    Metric.TASKS: "tasks_completed",
    Metric.STREAK: "current_streak",
}


def canonical_user_id(raw: Any) -> Optional[str]:
    """Normalize a user identifier to a lower-case hyphenated UUID string.

    Sessions and tasks store ids as text while streaks store UUIDs; both map
    to the same key here. Returns None for values that are not UUIDs.
    """

    if raw is None:
        return None
    if isinstance(raw, uuid.UUID):
        return str(raw)
    try:
        return str(uuid.UUID(str(raw).strip()))
    except ValueError:
        return None


def seconds_to_minutes(total_seconds: int) -> int:
    """Convert seconds to whole minutes, rounding halves up (90s -> 2)."""

    return (int(total_seconds) + 30) // 60


def resolve_window(period: Period, now: datetime) -> Optional[datetime]:
    """Return the inclusive lower bound for ``period`` or None for ``all``.

    Boundaries are local midnights in the timezone of ``now``. Weeks start
    on Sunday.
    """

    if now.tzinfo is None:
        now = now.replace(tzinfo=app_timezone())
    today = now.date()

    if period is Period.ALL:
        return None
    if period is Period.TODAY:
        day = today
    elif period is Period.WEEK:
        days_since_sunday = (now.weekday() + 1) % 7
        day = today - timedelta(days=days_since_sunday)
    elif period is Period.MONTH:
        day = today.replace(day=1)
    else:
        raise ValueError(f"Unsupported period: {period!r}")
    return datetime.combine(day, time.min, tzinfo=now.tzinfo)


def _keyed(records: Iterable[Any], source: str) -> Iterator[Tuple[str, Any]]:
    skipped = 0
    for record in records:
        user_id = canonical_user_id(record.user_id)
        if user_id is None:
            skipped += 1
            continue
        yield user_id, record
    if skipped:
        logger.warning("Skipped %d %s rows with malformed user ids", skipped, source)


def sum_focus_seconds(sessions: Iterable[Any]) -> Dict[str, int]:
    totals: Dict[str, int] = defaultdict(int)
    for user_id, session in _keyed(sessions, "session"):
        totals[user_id] += max(int(session.duration or 0), 0)
    return dict(totals)


def count_completed_tasks(tasks: Iterable[Any]) -> Dict[str, int]:
    counts: Dict[str, int] = defaultdict(int)
    for user_id, _task in _keyed(tasks, "task"):
        counts[user_id] += 1
    return dict(counts)


def latest_streaks(streaks: Iterable[Any]) -> Dict[str, int]:
    current: Dict[str, int] = {}
    for user_id, streak in _keyed(streaks, "streak"):
        current[user_id] = int(streak.current or 0)
    return current


def build_entries(
    focus_seconds: Dict[str, int],
    tasks_completed: Dict[str, int],
    current_streaks: Dict[str, int],
    profiles: Optional[Dict[str, Profile]] = None,
) -> List[LeaderboardEntry]:
    """Merge the per-source maps; users missing from a source get 0 there."""

    profiles = profiles or {}
    user_ids = dict.fromkeys([*focus_seconds, *tasks_completed, *current_streaks])

    entries: List[LeaderboardEntry] = []
    for user_id in user_ids:
        profile = profiles.get(user_id)
        entries.append(
            LeaderboardEntry(
                user_id=user_id,
                display_name=profile.name if profile else None,
                avatar=profile.avatar_url if profile else None,
                focus_minutes=seconds_to_minutes(focus_seconds.get(user_id, 0)),
                tasks_completed=tasks_completed.get(user_id, 0),
                current_streak=current_streaks.get(user_id, 0),
            )
        )
    return entries


def metric_value(entry: LeaderboardEntry, metric: Metric) -> int:
    return getattr(entry, _METRIC_FIELDS[metric])


def competition_ranks(values: Sequence[int]) -> List[int]:
    """Ranks for values already sorted in descending order."""

    ranks: List[int] = []
    for index, value in enumerate(values):
        if index == 0 or value != values[index - 1]:
            ranks.append(index + 1)
        else:
            ranks.append(ranks[-1])
    return ranks


def rank_entries(entries: Iterable[LeaderboardEntry], metric: Metric) -> List[LeaderboardEntry]:
    """Stable-sort by ``metric`` descending and assign competition ranks."""

    ordered = sorted(entries, key=lambda entry: metric_value(entry, metric), reverse=True)
    ranks = competition_ranks([metric_value(entry, metric) for entry in ordered])
    for entry, rank in zip(ordered, ranks):
        entry.rank = rank
    return ordered


def paginate(entries: Sequence[LeaderboardEntry], offset: int, limit: int) -> List[LeaderboardEntry]:
    if offset < 0 or limit < 0:
        raise ValueError("offset and limit must be non-negative")
    return list(entries[offset : offset + limit])


def compute_leaderboard(
    store: Any,
    period: Period | str,
    metric: Metric | str,
    offset: int = 0,
    limit: int = 100,
    now: Optional[datetime] = None,
) -> LeaderboardPage:
    """Build one page of the leaderboard from ``store``.

    ``store`` provides ``work_sessions(since)``, ``completed_tasks(since)``,
    ``streaks()`` and ``profiles()``. Any exception raised by the store
    propagates; no partial result is returned.
    """

    period = Period(period)
    metric = Metric(metric)
    start = resolve_window(period, now or local_now())

    focus = sum_focus_seconds(store.work_sessions(start))
    tasks = count_completed_tasks(store.completed_tasks(start))
    streaks = latest_streaks(store.streaks())
    profiles: Dict[str, Profile] = {}
    for profile in store.profiles():
        profile_id = canonical_user_id(profile.id)
        if profile_id is not None:
            profiles[profile_id] = profile

    ranked = rank_entries(build_entries(focus, tasks, streaks, profiles), metric)
    logger.debug(
        "Leaderboard period=%s metric=%s users=%d", period.value, metric.value, len(ranked)
    )
    return LeaderboardPage(
        entries=paginate(ranked, offset, limit),
        total=len(ranked),
        period=period,
        metric=metric,
        offset=offset,
        limit=limit,
    )


__all__ = [
    "build_entries",
    "canonical_user_id",
    "competition_ranks",
    "compute_leaderboard",
    "count_completed_tasks",
    "latest_streaks",
    "metric_value",
    "paginate",
    "rank_entries",
    "resolve_window",
    "seconds_to_minutes",
    "sum_focus_seconds",
]
