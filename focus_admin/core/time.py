"""Clock and timezone helpers.

Timestamps are stored as timezone-aware UTC. Values read back from backends
that drop the offset are treated as UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import APP_TIMEZONE


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Interpret naive values as UTC and convert aware ones to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).isoformat().replace("+00:00", "Z")


def app_timezone(name: Optional[str] = None) -> ZoneInfo:
    try:
        return ZoneInfo(name or APP_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")


def local_now(tz: Optional[ZoneInfo] = None) -> datetime:
    """Current time in the application timezone."""
    return utcnow().astimezone(tz or app_timezone())


__all__ = [
    "app_timezone",
    "as_utc",
    "isoformat",
    "local_now",
    "utcnow",
]
