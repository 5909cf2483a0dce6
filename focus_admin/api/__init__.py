"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI

from .guard import AdminGuardMiddleware
from .routers import ALL_ROUTERS


def register_routes(app: FastAPI) -> None:
    """Attach the navigation guard and all application routers."""

    app.add_middleware(AdminGuardMiddleware)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_routes"]
