"""Summary statistics endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...services.dashboard import compute_dashboard
from ...services.store import ActivityStore, get_activity_store
from ..deps import require_admin

router = APIRouter(prefix="/api/admin", tags=["dashboard"], dependencies=[Depends(require_admin)])


@router.get("/dashboard")
def get_dashboard(store: ActivityStore = Depends(get_activity_store)) -> Dict[str, Any]:
    return compute_dashboard(store)


__all__ = ["router"]
