# weather_relay/__init__.py
"""Slash-command to chat channel relay."""

__version__ = "0.1.0"
