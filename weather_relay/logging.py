# weather_relay/logging.py
"""
Structured logging for the weather relay.

Provides JSON-formatted logging with consistent fields:
- timestamp: ISO 8601
- level: DEBUG/INFO/WARNING/ERROR/CRITICAL
- logger: Module name
- message: Event name
- **kwargs: Additional structured fields

Usage:
    from weather_relay.logging import get_logger
    logger = get_logger(__name__)
    logger.info("notify_sent", status_code=200)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict


def _record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Structured fields attached by StructuredLogger, plus source for errors."""
    fields = dict(getattr(record, "structured_data", None) or {})
    if record.levelno >= logging.ERROR:
        fields["source"] = f"{record.filename}:{record.lineno} in {record.funcName}"
    return fields


class StructuredLogFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, fields."""

    def format(self, record: logging.LogRecord) -> str:
        line: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_record_fields(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, default=str)


class PlainLogFormatter(logging.Formatter):
    """Human-readable formatter that appends structured fields as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _record_fields(record)
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


class StructuredLogger:
    """
    Wrapper around Python logger that supports structured logging.

    Example:
        logger = get_logger(__name__)
        logger.info("http_request", method="POST", path="/weather", status=200)
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs):
        extra = {"structured_data": kwargs}
        self._logger.log(level, message, exc_info=exc_info, extra=extra)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def critical(self, message: str, exc_info: bool = False, **kwargs):
        self._log(logging.CRITICAL, message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with structured data (includes traceback)."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


# Global configuration state
_configured = False


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    force: bool = False,
):
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Use JSON format (True) or plain text (False)
        force: Reconfigure even if logging was already set up
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    if json_output:
        console_handler.setFormatter(StructuredLogFormatter())
    else:
        console_handler.setFormatter(PlainLogFormatter())
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries; requests are logged by
    # AccessLogMiddleware instead of uvicorn's access logger.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        StructuredLogger instance
    """
    # Auto-configure on first use
    if not _configured:
        configure_logging()
    return StructuredLogger(name)


def get_access_logger() -> StructuredLogger:
    """Get logger for the per-request access log."""
    return get_logger("weather_relay.access")
