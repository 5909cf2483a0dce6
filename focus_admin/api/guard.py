"""Login guard for browser navigation.

JSON endpoints under ``/api`` answer 401 themselves through
``require_admin``. Built console files are public so the login page can
load its scripts and styles. Every other path is redirected to the login
page when the session cookie is missing or invalid.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .deps import read_session_claims
from .routers.console import is_public_asset

LOGIN_PATH = "/login"
HOME_PATH = "/"
_PASSTHROUGH_PREFIXES = ("/api/", "/health", "/docs", "/redoc", "/openapi.json")


class AdminGuardMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path.startswith(_PASSTHROUGH_PREFIXES) or is_public_asset(path):
            return await call_next(request)

        claims = read_session_claims(request)
        if path == LOGIN_PATH:
            if claims is not None:
                return RedirectResponse(HOME_PATH, status_code=307)
            return await call_next(request)

        if claims is None:
            return RedirectResponse(LOGIN_PATH, status_code=307)
        return await call_next(request)


__all__ = ["AdminGuardMiddleware", "HOME_PATH", "LOGIN_PATH"]
