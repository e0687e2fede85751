# weather_relay/errors.py
"""Exceptions raised by the relay. Each maps to an empty HTTP 400."""


class RelayError(Exception):
    """Base exception for relay errors."""
    pass


class MalformedFormError(RelayError):
    """Raised when an inbound form body cannot be parsed."""
    pass


class NotifyError(RelayError):
    """Raised when the channel webhook could not be reached."""
    pass
