# tests/conftest.py
"""
Pytest configuration and fixtures.

The channel webhook is replaced by an httpx.MockTransport so no test talks
to the network unless it means to.
"""

from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_relay.main import app
from weather_relay.api.routes_weather import get_notifier
from weather_relay.webhooks import ChannelNotifier

CHANNEL_URL = "https://hooks.example.com/services/T000/B000/XXXX"


class RecordingChannel:
    """Mock channel endpoint that remembers every request it receives."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text="ok")


def unreachable_channel(request: httpx.Request) -> httpx.Response:
    """Mock transport handler that fails like a refused connection."""
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def notifier(channel):
    """Notifier wired to the recording channel."""
    with ChannelNotifier(CHANNEL_URL, transport=httpx.MockTransport(channel)) as n:
        yield n


@pytest.fixture
def client(notifier):
    """Test client for the app with the notifier swapped for the mock."""
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unreachable_client():
    """Test client whose channel refuses every connection."""
    broken = ChannelNotifier(CHANNEL_URL, transport=httpx.MockTransport(unreachable_channel))
    app.dependency_overrides[get_notifier] = lambda: broken
    yield TestClient(app)
    app.dependency_overrides.clear()
    broken.close()
