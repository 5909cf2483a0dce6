"""Admin credential check and signed session tokens."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Any, Dict, Optional

from authlib.jose import JsonWebToken
from authlib.jose.errors import JoseError

from .config import ADMIN_PASSWORD, ADMIN_USERNAME, JWT_SECRET, SESSION_TTL
from .time import utcnow

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"

_jwt = JsonWebToken(["HS256"])


def verify_credentials(username: Any, password: Any) -> bool:
    """Compare a submitted pair against the configured admin credentials."""

    if not isinstance(username, str) or not isinstance(password, str):
        return False
    user_ok = secrets.compare_digest(username.encode(), ADMIN_USERNAME.encode())
    pass_ok = secrets.compare_digest(password.encode(), ADMIN_PASSWORD.encode())
    return user_ok and pass_ok


def create_session_token(now: Optional[datetime] = None) -> str:
    """Issue an HS256 token carrying the admin role and a 7 day expiry."""

    issued_at = now or utcnow()
    payload = {
        "role": ADMIN_ROLE,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + SESSION_TTL).timestamp()),
    }
    token = _jwt.encode({"alg": "HS256"}, payload, JWT_SECRET)
    return token.decode("ascii")


def verify_session_token(
    token: Optional[str], now: Optional[datetime] = None
) -> Optional[Dict[str, Any]]:
    """Return the token claims, or None for any kind of invalid token.

    Malformed, tampered and expired tokens are indistinguishable to callers.
    """

    if not token:
        return None
    checked_at = now or utcnow()
    try:
        claims = _jwt.decode(token, JWT_SECRET)
        if "exp" not in claims:
            return None
        claims.validate(now=int(checked_at.timestamp()))
    except (JoseError, ValueError, TypeError) as exc:
        logger.debug("Rejected session token: %s", type(exc).__name__)
        return None

    if claims.get("role") != ADMIN_ROLE:
        return None
    return dict(claims)


__all__ = [
    "ADMIN_ROLE",
    "create_session_token",
    "verify_credentials",
    "verify_session_token",
]
