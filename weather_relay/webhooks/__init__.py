# weather_relay/webhooks/__init__.py
"""
Webhook module for outbound notifications.

Posts slash-command text to the configured chat channel.
"""

from .notifier import ChannelMessage, ChannelNotifier

__all__ = ["ChannelMessage", "ChannelNotifier"]
