"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .console import router as console_router
from .dashboard import router as dashboard_router
from .feedback import router as feedback_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router
from .users import router as users_router

# The console catch-all must stay last.
ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    auth_router,
    dashboard_router,
    users_router,
    leaderboard_router,
    feedback_router,
    console_router,
)

__all__ = ["ALL_ROUTERS"]
