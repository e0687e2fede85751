# weather_relay/api/routes_health.py
"""
Liveness and static routes.
"""

from pathlib import Path

from fastapi import APIRouter, Response
from fastapi.responses import FileResponse, PlainTextResponse

from ..settings import settings

router = APIRouter(tags=["health"])

FAVICON_NAME = "favicon.ico"


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    """Confirm the service is up."""
    return "The service is working!"


@router.get("/favicon.ico")
async def favicon() -> Response:
    """Serve favicon.ico from the static directory (the working directory by default)."""
    path = Path(settings.static_dir) / FAVICON_NAME
    if not path.is_file():
        return PlainTextResponse("404 page not found", status_code=404)
    return FileResponse(path, media_type="image/x-icon")
