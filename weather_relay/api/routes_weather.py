# weather_relay/api/routes_weather.py
"""
Slash-command relay route.

POST /weather takes the chat platform's form payload and forwards its
``text`` field to the channel webhook. Malformed forms and failed deliveries
raise RelayError subclasses, which the application answers with an empty 400.
"""

from fastapi import APIRouter, Depends, Request, Response

from ..webhooks import ChannelNotifier
from .forms import read_slash_command_text

router = APIRouter(tags=["weather"])


def get_notifier(request: Request) -> ChannelNotifier:
    """The notifier created at startup."""
    return request.app.state.notifier


@router.post("/weather")
def relay_weather(
    text: str = Depends(read_slash_command_text),
    notifier: ChannelNotifier = Depends(get_notifier),
) -> Response:
    # Sync handler: the blocking POST runs in the worker thread pool
    notifier.notify(text)
    return Response(status_code=200)
