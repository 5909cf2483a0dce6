"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    ALLOWED_CORS_ORIGINS,
    APP_TIMEZONE,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    CONSOLE_DIR,
    DATABASE_URL,
    DB_RESET,
    ENV,
    LOG_LEVEL,
    SESSION_COOKIE_NAME,
    SESSION_TTL,
)
from .database import engine, get_session
from .time import app_timezone, as_utc, isoformat, local_now, utcnow

__all__ = [
    "ADMIN_PASSWORD",
    "ADMIN_USERNAME",
    "ALLOWED_CORS_ORIGINS",
    "APP_TIMEZONE",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "CONSOLE_DIR",
    "DATABASE_URL",
    "DB_RESET",
    "ENV",
    "LOG_LEVEL",
    "SESSION_COOKIE_NAME",
    "SESSION_TTL",
    "app_timezone",
    "as_utc",
    "engine",
    "get_session",
    "isoformat",
    "local_now",
    "utcnow",
]
