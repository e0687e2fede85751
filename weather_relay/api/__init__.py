# weather_relay/api/__init__.py
"""API routes package."""

from .routes_health import router as health_router
from .routes_weather import router as weather_router

__all__ = [
    "health_router",
    "weather_router",
]
