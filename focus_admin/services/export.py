"""CSV export of ranked leaderboard entries."""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..models import LeaderboardEntry, Metric, Period

CSV_COLUMNS = ("Rank", "Name", "Focus Time (min)", "Tasks Completed", "Current Streak")
UNKNOWN_NAME = "Unknown"


def entries_to_csv(entries: Iterable[LeaderboardEntry]) -> str:
    """Serialize entries in the order given; the header row is always written."""

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for entry in entries:
        writer.writerow(
            [
                entry.rank,
                entry.display_name or UNKNOWN_NAME,
                entry.focus_minutes,
                entry.tasks_completed,
                entry.current_streak,
            ]
        )
    return output.getvalue()


def export_filename(period: Period, metric: Metric, today: date) -> str:
    return f"leaderboard-{period.value}-{metric.value}-{today.isoformat()}.csv"


__all__ = ["CSV_COLUMNS", "UNKNOWN_NAME", "entries_to_csv", "export_filename"]
