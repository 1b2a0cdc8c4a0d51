"""Configuration for the MvcMovie catalog.

Values come from environment variables or a ``.env`` file. Every
setting has a local default, so the catalog runs against a SQLite
file without any configuration.

Usage:
    from mvcmovie.settings import settings

    settings.database.url
    settings.logging.level
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mvcmovie.settings.api import APISettings
from mvcmovie.settings.base import LoggingSettings
from mvcmovie.settings.database import DatabaseSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "DatabaseSettings",
    "APISettings",
    "get_masked_settings",
]

ENVIRONMENTS = frozenset({"development", "production", "test"})


class Settings(BaseSettings):
    """All configuration sections behind one object.

    Attributes:
        environment: Deployment environment (ENVIRONMENT).
        debug: FastAPI debug mode (DEBUG).
        logging: structlog section.
        database: Catalog store section.
        api: Web front end section.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Normalize to lower case and reject unknown environments."""
        env = v.lower()
        if env not in ENVIRONMENTS:
            raise ValueError(f"Invalid ENVIRONMENT {v!r}. Valid: {sorted(ENVIRONMENTS)}")
        return env


settings = Settings()


def get_masked_settings() -> dict[str, Any]:
    """Dump the active settings with the database password hidden.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    config["database"]["url"] = settings.database.masked_url
    return config
