"""Runtime configuration from environment variables."""

from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime configuration from environment variables.

    All settings can be overridden via environment variables with RELAY_PROBE_ prefix.
    Example: RELAY_PROBE_LOG_LEVEL=debug

    Only diagnostics on stderr are affected; the bytes written to stdout
    never depend on these settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="RELAY_PROBE_",
        extra="ignore",
    )

    log_level: LogLevel | None = None
    """Log level for diagnostics (None keeps the library default, WARNING)."""

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        # Unknown names fall back to the default instead of failing the relay
        if isinstance(value, str):
            value = value.strip().upper()
            return value if value in get_args(LogLevel) else None
        return value
