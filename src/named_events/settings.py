"""Package configuration using Pydantic Settings.

Values can be provided via environment variables or fall back to the defaults
below. A ``NamedEventsSettings`` instance is intended to be retrieved via
``get_settings`` which caches the object for reuse across the process.

Environment variable prefix: ``NAMED_EVENTS_`` (e.g. ``NAMED_EVENTS_LOG_LEVEL``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NamedEventsSettings(BaseSettings):
    """Runtime settings for event sources.

    Attributes map directly to environment variables using the
    ``NAMED_EVENTS_`` prefix (case-insensitive).
    """

    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used by setup_logging when none is given",
    )
    isolate_listeners: bool = Field(
        default=False,
        description="Default dispatch policy: run each listener in its own try-scope instead of failing fast",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    model_config = SettingsConfigDict(
        env_prefix="NAMED_EVENTS_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> NamedEventsSettings:
    """Return the cached ``NamedEventsSettings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object. Sources read it once, at construction.
    """

    return NamedEventsSettings()


__all__ = ["NamedEventsSettings", "get_settings"]
