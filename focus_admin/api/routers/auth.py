"""Admin login, logout and session introspection."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from ...core import (
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    SESSION_COOKIE_NAME,
    SESSION_TTL,
)
from ...core.security import create_session_token, verify_credentials
from ..deps import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(body: Dict[str, Any]):
    """Exchange the admin credentials for a session cookie."""

    if not verify_credentials(body.get("username"), body.get("password")):
        logger.info("Rejected admin login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    response = JSONResponse({"success": True})
    response.set_cookie(
        SESSION_COOKIE_NAME,
        create_session_token(),
        max_age=int(SESSION_TTL.total_seconds()),
        path="/",
        domain=COOKIE_DOMAIN,
        secure=COOKIE_SECURE,
        httponly=True,
        samesite=COOKIE_SAMESITE,
    )
    logger.info("Admin session issued")
    return response


@router.post("/logout")
def logout():
    response = JSONResponse({"success": True})
    response.delete_cookie(
        SESSION_COOKIE_NAME,
        path="/",
        domain=COOKIE_DOMAIN,
        secure=COOKIE_SECURE,
        httponly=True,
        samesite=COOKIE_SAMESITE,
    )
    logger.info("Admin session cleared")
    return response


@router.get("/session")
def current_session(claims: Dict[str, Any] = Depends(require_admin)):
    expires_at = datetime.fromtimestamp(claims["exp"], timezone.utc)
    return {
        "authenticated": True,
        "role": claims.get("role"),
        "expires_at": expires_at.isoformat().replace("+00:00", "Z"),
    }


__all__ = ["router"]
