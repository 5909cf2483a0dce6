"""Exception handlers shared by every route."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Abort the request with a generic 500; details stay in the server log."""

    logger.error(
        "Store failure on %s %s: %s",
        request.method,
        request.url.path,
        exc.__class__.__name__,
        exc_info=exc,
    )
    return JSONResponse({"detail": "Internal server error"}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SQLAlchemyError, store_error_handler)


__all__ = ["register_error_handlers", "store_error_handler"]
