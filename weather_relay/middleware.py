# weather_relay/middleware.py
"""
Request middleware applied to every route.

- AccessLogMiddleware: one structured log line per request
- RecoveryMiddleware: turns an unhandled handler exception into an empty 500
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .logging import get_access_logger, get_logger

logger = get_logger(__name__)
access_logger = get_access_logger()


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of each request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        client = request.client
        access_logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round(duration_ms, 2),
            remote_addr=f"{client.host}:{client.port}" if client else None,
        )
        return response


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Answer 500 instead of dropping the connection when a handler raises."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "panic_recovered",
                method=request.method,
                path=request.url.path,
            )
            return Response(status_code=500)
