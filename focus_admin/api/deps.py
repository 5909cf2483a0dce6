"""Shared request dependencies for the API routers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import HTTPException, Request, status

from ..core import SESSION_COOKIE_NAME
from ..core.security import verify_session_token

E = TypeVar("E", bound=Enum)


def read_session_claims(request: Request) -> Optional[Dict[str, Any]]:
    """Decode the admin session cookie, or None when absent or invalid."""

    return verify_session_token(request.cookies.get(SESSION_COOKIE_NAME))


def require_admin(request: Request) -> Dict[str, Any]:
    claims = read_session_claims(request)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return claims


def parse_choice(enum_cls: Type[E], raw: Any, label: str) -> E:
    """Map a raw parameter onto ``enum_cls`` or reject it with a 400."""

    try:
        return enum_cls(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {label}") from None


__all__ = ["parse_choice", "read_session_claims", "require_admin"]
