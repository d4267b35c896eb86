"""Read-only view of the active parsing configuration."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["config"])


@router.get("/markers")
async def get_markers(request: Request) -> dict:
    """Return the marker substrings used to locate mapping rows."""
    return request.app.state.settings.markers.model_dump()
