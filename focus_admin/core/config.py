"""Application settings and environment helpers."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


ENV = os.getenv("ENV", "development").strip().lower()
IS_PRODUCTION = ENV == "production"


# Admin credentials ----------------------------------------------------------
if IS_PRODUCTION:
    ADMIN_USERNAME = _require_env("ADMIN_USERNAME")
    ADMIN_PASSWORD = _require_env("ADMIN_PASSWORD")
    JWT_SECRET = _require_env("JWT_SECRET")
else:
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")
    JWT_SECRET = os.getenv(
        "JWT_SECRET", "focus-admin-development-secret-minimum-32-chars"
    )


# Session cookie -------------------------------------------------------------
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "admin_session")
SESSION_TTL = timedelta(days=7)

COOKIE_DOMAIN = os.getenv("COOKIE_DOMAIN") or None
COOKIE_SECURE = _env_bool("COOKIE_SECURE", IS_PRODUCTION)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *([] if IS_PRODUCTION else _local_dev_origins),
    ]
)


# Runtime behaviour ----------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'app.db'}")
DB_RESET = _env_bool("DB_RESET", False)

# Built admin console (single-page app) served behind the login guard.
CONSOLE_DIR = Path(os.getenv("CONSOLE_DIR", str(_PROJECT_ROOT / "public" / "console")))

APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


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
    "DATA_DIR",
    "DB_RESET",
    "ENV",
    "IS_PRODUCTION",
    "JWT_SECRET",
    "LOG_LEVEL",
    "SESSION_COOKIE_NAME",
    "SESSION_TTL",
]
