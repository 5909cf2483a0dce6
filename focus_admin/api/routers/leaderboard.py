"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlmodel import SQLModel

from ...core import local_now
from ...models import LeaderboardEntry, Metric, Period
from ...services.export import entries_to_csv, export_filename
from ...services.leaderboard import compute_leaderboard
from ...services.store import ActivityStore, get_activity_store
from ..deps import parse_choice, require_admin

router = APIRouter(
    prefix="/api/admin", tags=["leaderboard"], dependencies=[Depends(require_admin)]
)


class LeaderboardExport(SQLModel):
    entries: List[LeaderboardEntry] = []
    period: str = Period.ALL.value
    metric: str = Metric.FOCUS_TIME.value


@router.get("/leaderboard")
def get_leaderboard(
    period: str = Period.ALL.value,
    metric: str = Metric.FOCUS_TIME.value,
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    store: ActivityStore = Depends(get_activity_store),
) -> Dict[str, Any]:
    """Rank users for the selected period and metric."""

    page = compute_leaderboard(
        store,
        parse_choice(Period, period, "period"),
        parse_choice(Metric, metric, "metric"),
        offset=offset,
        limit=limit,
    )
    return {
        "entries": [entry.model_dump() for entry in page.entries],
        "period": page.period.value,
        "metric": page.metric.value,
        "total": page.total,
        "offset": page.offset,
        "limit": page.limit,
    }


@router.post("/leaderboard/export")
def export_leaderboard(body: LeaderboardExport) -> StreamingResponse:
    """Return previously fetched entries as a CSV attachment."""

    period = parse_choice(Period, body.period, "period")
    metric = parse_choice(Metric, body.metric, "metric")
    filename = export_filename(period, metric, local_now().date())

    return StreamingResponse(
        iter([entries_to_csv(body.entries)]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


__all__ = ["router"]
