"""Serve the built admin console behind the login guard."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, Response

from ...core import CONSOLE_DIR

router = APIRouter(tags=["console"], include_in_schema=False)

INDEX_NAMES = ("", "index.html")
FAVICON = "favicon.ico"


def asset_path(path: str) -> Optional[Path]:
    """Return the built file for ``path``, or None for pages and unknown paths.

    The index document is a page, not an asset.
    """

    path = path.lstrip("/")
    if path in INDEX_NAMES:
        return None

    base = CONSOLE_DIR.resolve()
    full_path = (base / path).resolve()
    if base not in full_path.parents or not full_path.is_file():
        return None
    return full_path


def is_public_asset(path: str) -> bool:
    """Static files the login page needs before a session exists."""

    return path.lstrip("/") == FAVICON or asset_path(path) is not None


def _index() -> FileResponse:
    index = CONSOLE_DIR / "index.html"
    if not index.is_file():
        raise HTTPException(404, "Console not built")
    return FileResponse(index)


@router.get("/login")
def console_login():
    return _index()


@router.get("/{path:path}")
def console_assets(path: str):
    if path.startswith("api/"):
        raise HTTPException(404, "Not Found")

    full_path = asset_path(path)
    if full_path is not None:
        return FileResponse(full_path)

    # Quietly swallow missing favicon
    if path == FAVICON:
        return Response(status_code=204)

    # Client-side routes fall back to the SPA index.
    return _index()


__all__ = ["asset_path", "is_public_asset", "router"]
