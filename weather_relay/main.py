# weather_relay/main.py
"""
Weather Relay - Main Application

Receives slash-command webhooks from a chat platform and forwards their text
to a channel's incoming webhook.
"""

import math
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response

from .settings import settings
from .logging import configure_logging, get_logger
from .errors import MalformedFormError, NotifyError
from .middleware import AccessLogMiddleware, RecoveryMiddleware
from .webhooks import ChannelNotifier
from .api import health_router, weather_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Opens the channel notifier on startup and closes it on shutdown.
    """
    if settings.slack_url == "SLACK_URL":
        logger.warning("slack_url_not_configured")

    notifier = ChannelNotifier(
        settings.slack_url,
        timeout_seconds=settings.notify_timeout_seconds,
    )
    app.state.notifier = notifier

    yield

    notifier.close()
    logger.info("server_stopped")


app = FastAPI(
    title="Weather Relay",
    description="Relays slash-command text to a chat channel webhook.",
    version="0.1.0",
    lifespan=lifespan,
)

# Last added runs first: access log wraps recovery so 500s are logged too
app.add_middleware(RecoveryMiddleware)
app.add_middleware(AccessLogMiddleware)

app.include_router(health_router)
app.include_router(weather_router)


@app.exception_handler(MalformedFormError)
async def malformed_form_handler(request: Request, exc: MalformedFormError) -> Response:
    logger.warning("form_parse_failed", path=request.url.path, error=str(exc))
    return Response(status_code=400)


@app.exception_handler(NotifyError)
async def notify_failed_handler(request: Request, exc: NotifyError) -> Response:
    logger.warning("notify_failed", path=request.url.path, error=str(exc))
    return Response(status_code=400)


def run():
    """Run the server (entry point for CLI)."""
    import uvicorn

    configure_logging(settings.log_level, settings.log_json, force=True)

    try:
        port = int(settings.port)
    except ValueError:
        logger.critical(
            "server_start_failed",
            address=settings.address,
            error=f"invalid port: {settings.port!r}",
        )
        sys.exit(1)

    logger.info("server_starting", url=f"http://{settings.address}")

    # uvicorn logs a failed bind and exits with status 1
    uvicorn.run(
        app,
        host=settings.api_host,
        port=port,
        timeout_keep_alive=math.ceil(settings.server_timeout_seconds),
        log_config=None,
    )


if __name__ == "__main__":
    run()
