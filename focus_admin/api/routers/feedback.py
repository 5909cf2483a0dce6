"""Feedback inbox endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, col, func, select

from ...core import get_session, isoformat
from ...models import Feedback, FeedbackType, Profile
from ..deps import parse_choice, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["feedback"], dependencies=[Depends(require_admin)])

ALL_TYPES = "all"


def feedback_to_dict(feedback: Feedback, profile: Optional[Profile]) -> Dict[str, Any]:
    if feedback.user_id:
        user_name = (profile.name if profile else None) or feedback.name
        user_avatar = profile.avatar_url if profile else None
    else:
        user_name = feedback.name or "Anonymous"
        user_avatar = None
    return {
        "id": feedback.id,
        "user_id": str(feedback.user_id) if feedback.user_id else None,
        "name": feedback.name,
        "email": feedback.email,
        "type": feedback.type,
        "message": feedback.message,
        "created_at": isoformat(feedback.created_at),
        "user_name": user_name,
        "user_avatar": user_avatar,
    }


@router.get("/feedback")
def list_feedback(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    type: Optional[str] = None,
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Newest feedback first, optionally restricted to one type."""

    query = select(Feedback)
    count_query = select(func.count()).select_from(Feedback)
    if type and type != ALL_TYPES:
        feedback_type = parse_choice(FeedbackType, type, "feedback type")
        query = query.where(Feedback.type == feedback_type.value)
        count_query = count_query.where(Feedback.type == feedback_type.value)

    feedbacks: List[Feedback] = session.exec(
        query.order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    ).all()
    total = session.exec(count_query).one()

    user_ids = {feedback.user_id for feedback in feedbacks if feedback.user_id}
    profiles: Dict[Any, Profile] = {}
    if user_ids:
        rows = session.exec(select(Profile).where(col(Profile.id).in_(list(user_ids)))).all()
        profiles = {profile.id: profile for profile in rows}

    return {
        "feedbacks": [
            feedback_to_dict(feedback, profiles.get(feedback.user_id)) for feedback in feedbacks
        ],
        "total": total,
        "page": page,
        "limit": limit,
    }


@router.delete("/feedback/{feedback_id}")
def delete_feedback(feedback_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    feedback = session.get(Feedback, feedback_id)
    if not feedback:
        raise HTTPException(404, "Feedback not found")

    session.delete(feedback)
    session.commit()
    logger.info("Deleted feedback %s", feedback_id)
    return {"success": True}


__all__ = ["router"]
