# weather_relay/settings.py
"""
Application settings.

Values come from the environment once at startup. A missing variable falls
back to a literal string; for DARKSKY_API_KEY and SLACK_URL that literal is
the variable's own name, so an unconfigured relay still starts and only fails
when it tries to deliver.
"""

import os
from dataclasses import dataclass

# Load .env file
from dotenv import load_dotenv
load_dotenv()


def get_env(key: str, fallback: str) -> str:
    """Return the variable's value if it is set (even to ""), else fallback."""
    value = os.environ.get(key)
    if value is None:
        return fallback
    return value


def get_float_env(key: str, fallback: float) -> float:
    """Numeric variant of get_env; an unparsable value also yields fallback."""
    try:
        return float(get_env(key, str(fallback)))
    except ValueError:
        return fallback


@dataclass(frozen=True)
class Settings:
    """Application configuration."""

    # Weather API (loaded, not used by any route)
    darksky_api_key: str

    # Incoming-webhook URL of the chat channel
    slack_url: str

    # API settings
    api_host: str = "0.0.0.0"
    port: str = "3000"
    server_timeout_seconds: float = 15.0

    # Outbound notifier
    notify_timeout_seconds: float = 5.0

    # Directory favicon.ico is served from
    static_dir: str = "."

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @property
    def address(self) -> str:
        return f"{self.api_host}:{self.port}"


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        darksky_api_key=get_env("DARKSKY_API_KEY", "DARKSKY_API_KEY"),
        slack_url=get_env("SLACK_URL", "SLACK_URL"),
        api_host=get_env("API_HOST", "0.0.0.0"),
        port=get_env("PORT", "3000"),
        server_timeout_seconds=get_float_env("SERVER_TIMEOUT", 15.0),
        notify_timeout_seconds=get_float_env("NOTIFY_TIMEOUT", 5.0),
        static_dir=get_env("STATIC_DIR", "."),
        log_level=get_env("LOG_LEVEL", "INFO"),
        log_json=get_env("LOG_JSON", "true").lower() == "true",
    )


# Global settings instance
settings = load_settings()
