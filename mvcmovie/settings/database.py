"""Catalog store settings.

SQLite is the default store; any SQLAlchemy URL (for example a
``postgresql+psycopg2://`` one) can be supplied instead.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url

from mvcmovie.settings.base import SECTION_CONFIG


class DatabaseSettings(BaseSettings):
    """Relational store configuration.

    Attributes:
        url: Full SQLAlchemy connection URL (DATABASE_URL).
        echo: Log every SQL statement.
        pool_size: Persistent connections kept by the pool.
        pool_overflow: Extra connections allowed above pool_size.
        pool_timeout: Seconds to wait for a pooled connection.
    """

    model_config = SECTION_CONFIG

    url: str = Field(default="sqlite:///./mvcmovie.db", alias="DATABASE_URL")
    echo: bool = Field(default=False, alias="DB_ECHO")

    # Ignored for SQLite
    pool_size: int = Field(default=5, ge=1, alias="DB_POOL_SIZE")
    pool_overflow: int = Field(default=10, ge=0, alias="DB_POOL_OVERFLOW")
    pool_timeout: int = Field(default=30, ge=1, alias="DB_POOL_TIMEOUT")

    @property
    def masked_url(self) -> str:
        """Connection URL with the password hidden, safe for logging."""
        return make_url(self.url).render_as_string(hide_password=True)
