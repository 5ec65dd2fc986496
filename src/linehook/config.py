"""Webhook server and API client configuration from environment variables."""

from __future__ import annotations

import os

from linehook.protocol.errors import ConfigurationError
from linehook.protocol.types import DEFAULT_API_BASE_URL


class Settings:
    """linehook settings, read from environment variables with defaults.

    The channel secret and access token have no defaults; commands that
    need them call :meth:`require` so a missing value is reported once, at
    startup, with the variable name.
    """

    _ENV_NAMES = {
        "channel_secret": "CHANNEL_SECRET",
        "channel_access_token": "CHANNEL_ACCESS_TOKEN",
    }

    def __init__(self) -> None:
        self.channel_secret: str | None = os.getenv("CHANNEL_SECRET")
        self.channel_access_token: str | None = os.getenv("CHANNEL_ACCESS_TOKEN")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))
        self.api_base_url: str = os.getenv("LINE_API_BASE_URL", DEFAULT_API_BASE_URL)
        self.api_timeout: float = float(os.getenv("LINE_API_TIMEOUT", "30.0"))
        self.log_level: str = os.getenv("LINEHOOK_LOG_LEVEL", "INFO").upper()
        self.debug: bool = os.getenv("LINEHOOK_DEBUG", "").lower() in ("1", "true", "yes")

    def require(self, *names: str) -> None:
        """Raise ``ConfigurationError`` if any of the named settings is empty."""
        missing = [
            self._ENV_NAMES.get(name, name.upper())
            for name in names
            if not getattr(self, name, None)
        ]
        if missing:
            raise ConfigurationError(f"{', '.join(missing)} must be set")
