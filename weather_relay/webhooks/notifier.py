# weather_relay/webhooks/notifier.py
"""
Channel notifier - POSTs a text message to the chat channel's incoming webhook.

A delivery succeeds as soon as the channel answers, whatever the status code.
Only transport failures are errors. Nothing is retried.
"""

from dataclasses import dataclass, asdict
from typing import Optional

import httpx

from ..errors import NotifyError
from ..logging import get_logger

logger = get_logger(__name__)

# httpx's own default; the relay sets no tighter bound
DEFAULT_TIMEOUT = 5.0


@dataclass
class ChannelMessage:
    """Payload accepted by an incoming-webhook URL."""
    text: str


class ChannelNotifier:
    """
    Sends messages to a single channel webhook.

    Holds one httpx.Client so connections to the channel are pooled across
    requests. The client is thread-safe; one notifier serves every request.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout_seconds
        self.client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def notify(self, text: str) -> None:
        """
        Post ``{"text": text}`` to the channel.

        Args:
            text: Message text, forwarded verbatim (may be empty)

        Raises:
            NotifyError: The request could not be sent or no response arrived
        """
        payload = asdict(ChannelMessage(text=text))

        try:
            # post() reads the whole body and hands the connection back to the pool
            response = self.client.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            logger.warning("notify_timeout", error=str(e))
            raise NotifyError(f"Timeout: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("notify_transport_error", error=str(e))
            raise NotifyError(str(e)) from e

        logger.info(
            "notify_delivered",
            status_code=response.status_code,
            bytes_sent=len(response.request.content),
        )

    def close(self):
        """Close HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
