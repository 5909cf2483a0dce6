"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import ALLOWED_CORS_ORIGINS, DB_RESET, ENV, LOG_LEVEL, engine
from .core.errors import register_error_handlers
from .core.logging import LOGGER_NAME, configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger(LOGGER_NAME)
    if DB_RESET:
        logger.warning("DB_RESET set; dropping all tables")
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    logger.info("Focus admin API started (env=%s)", ENV)
    yield
    logger.info("Focus admin API stopping")


def create_app() -> FastAPI:
    configure_logging(ENV, LOG_LEVEL)
    app = FastAPI(title="Focus Admin API", version="0.1.0", lifespan=lifespan)

    register_routes(app)
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("focus_admin.app:app", host="127.0.0.1", port=3000, reload=True)
