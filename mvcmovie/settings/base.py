"""Shared building blocks for the settings sections.

Every section reads its own environment variables (optionally from a
``.env`` file in the working directory) and ignores the others.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
)

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
LOG_FORMATS = frozenset({"json", "console"})


# =============================================================================
# LOGGING
# =============================================================================


class LoggingSettings(BaseSettings):
    """structlog configuration.

    Attributes:
        level: Minimum level emitted (LOG_LEVEL).
        format: ``json`` for machine-readable lines, ``console`` for
            colored development output (LOG_FORMAT).
    """

    model_config = SECTION_CONFIG

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    format: str = Field(default="json", alias="LOG_FORMAT")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any case, store upper case."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL {v!r}. Valid: {sorted(LOG_LEVELS)}")
        return level

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Accept any case, store lower case."""
        fmt = v.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Invalid LOG_FORMAT {v!r}. Valid: {sorted(LOG_FORMATS)}")
        return fmt
