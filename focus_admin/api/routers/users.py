"""User listing, detail and enable/disable endpoints."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, func, or_, select

from ...core import get_session, isoformat, utcnow
from ...models import AuthUser, Profile
from ...services.users import (
    UserAction,
    apply_user_action,
    is_banned,
    profile_to_dict,
    user_activity,
    user_to_dict,
)
from ..deps import parse_choice, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["users"], dependencies=[Depends(require_admin)])


def _like_pattern(term: str) -> str:
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _load_user(session: Session, user_id: str) -> AuthUser:
    try:
        user_uuid = uuid.UUID(str(user_id))
    except ValueError:
        raise HTTPException(404, "User not found") from None
    user = session.get(AuthUser, user_uuid)
    if not user:
        raise HTTPException(404, "User not found")
    return user


@router.get("/users")
def list_users(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """List accounts, newest first, optionally filtered by email or name."""

    query = select(AuthUser, Profile).join(
        Profile, Profile.id == AuthUser.id, isouter=True
    )
    count_query = (
        select(func.count())
        .select_from(AuthUser)
        .join(Profile, Profile.id == AuthUser.id, isouter=True)
    )

    term = (search or "").strip()
    if term:
        pattern = _like_pattern(term)
        condition = or_(
            func.lower(AuthUser.email).like(pattern, escape="\\"),
            func.lower(Profile.name).like(pattern, escape="\\"),
            func.lower(AuthUser.full_name).like(pattern, escape="\\"),
        )
        query = query.where(condition)
        count_query = count_query.where(condition)

    rows = session.exec(
        query.order_by(AuthUser.created_at.desc(), AuthUser.email)
        .offset((page - 1) * limit)
        .limit(limit)
    ).all()
    total = session.exec(count_query).one()

    now = utcnow()
    return {
        "users": [user_to_dict(user, profile, now) for user, profile in rows],
        "total": total,
        "page": page,
        "limit": limit,
    }


@router.get("/users/{user_id}")
def get_user(user_id: str, session: Session = Depends(get_session)) -> Dict[str, Any]:
    """Account detail with recent activity and lifetime stats."""

    user = _load_user(session, user_id)
    profile = session.get(Profile, user.id)
    activity = user_activity(session, user)

    payload = user_to_dict(user, profile, utcnow())
    payload["profile"] = profile_to_dict(profile)
    payload["stats"] = activity["stats"]
    return {
        "user": payload,
        "sessions": activity["sessions"],
        "tasks": activity["tasks"],
    }


@router.patch("/users/{user_id}")
def update_user_status(
    user_id: str,
    body: Dict[str, Any],
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Enable or disable an account through its ban timestamp."""

    action = parse_choice(UserAction, body.get("action"), "action")
    user = _load_user(session, user_id)

    now = utcnow()
    apply_user_action(user, action, now)
    session.add(user)
    session.commit()
    session.refresh(user)

    logger.info("User %s %sd", user.id, action.value)
    return {
        "success": True,
        "message": f"User {action.value}d",
        "is_banned": is_banned(user.banned_until, now),
        "banned_until": isoformat(user.banned_until),
    }


__all__ = ["router"]
