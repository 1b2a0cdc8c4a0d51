"""Database connection management with SQLAlchemy 2.0.

Provides transactional sessions, schema lifecycle and health checks
for the catalog store.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from mvcmovie.database.models import Base
from mvcmovie.settings import DatabaseSettings, settings
from mvcmovie.utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseConnection:
    """Owns an engine and a session factory for one database URL.

    Unlike a process-wide singleton, several connections may coexist,
    which lets each test work against its own isolated store.

    Example:
        ```python
        db = DatabaseConnection("sqlite:///./mvcmovie.db")
        db.create_schema()
        with db.session() as session:
            session.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, url: str, config: DatabaseSettings | None = None) -> None:
        """Create the engine and session factory.

        Args:
            url: SQLAlchemy connection URL.
            config: Pool and echo settings (defaults to global settings).
        """
        self._url = url
        self._config = config or settings.database
        self._engine = self._create_engine()
        self._session_factory = self._create_session_factory()

    def _create_engine(self) -> Engine:
        """Create the SQLAlchemy engine.

        SQLite gets thread-shareable connections and enforced foreign
        keys; other backends get a sized connection pool.

        Returns:
            Configured Engine.
        """
        url = make_url(self._url)
        options: dict[str, Any] = {"echo": self._config.echo, "pool_pre_ping": True}

        if url.get_backend_name() == "sqlite":
            options["connect_args"] = {"check_same_thread": False}
        else:
            options.update(
                pool_size=self._config.pool_size,
                max_overflow=self._config.pool_overflow,
                pool_timeout=self._config.pool_timeout,
            )

        engine = create_engine(url, **options)

        if url.get_backend_name() == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        return engine

    def _create_session_factory(self) -> sessionmaker[Session]:
        """Create synchronous session factory.

        Returns:
            Configured sessionmaker for sync sessions.
        """
        return sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional session scope.

        Automatically commits on success, rolls back on exception,
        and closes the session when done.

        Yields:
            SQLAlchemy Session instance.

        Raises:
            Exception: Re-raises any exception after rollback.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        """Create all catalog tables that do not exist yet."""
        Base.metadata.create_all(self._engine)
        logger.info("schema_created", tables=sorted(Base.metadata.tables))

    def drop_schema(self) -> None:
        """Drop all catalog tables."""
        Base.metadata.drop_all(self._engine)
        logger.warning("schema_dropped", tables=sorted(Base.metadata.tables))

    def check_connection(self) -> bool:
        """Test database connectivity with a simple query.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            with self.session() as session:
                session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as exc:
            logger.error("database_unreachable", error=str(exc))
            return False

    def dispose(self) -> None:
        """Dispose the connection pool and release resources."""
        self._engine.dispose()

    @property
    def engine(self) -> Engine:
        """Get the underlying engine."""
        return self._engine

    @property
    def url(self) -> str:
        """Connection URL with the password hidden."""
        return make_url(self._url).render_as_string(hide_password=True)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# =============================================================================
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# =============================================================================

_db: DatabaseConnection | None = None


def get_database() -> DatabaseConnection:
    """Get the application's DatabaseConnection.

    Creates the instance from settings on first call (lazy initialization).

    Returns:
        Shared DatabaseConnection instance.
    """
    global _db  # noqa: PLW0603
    if _db is None:
        _db = DatabaseConnection(settings.database.url)
        logger.info("database_configured", url=_db.url)
    return _db


def close_database() -> None:
    """Close the application's connection pool.

    Call during application shutdown to release resources.
    """
    global _db  # noqa: PLW0603
    if _db is not None:
        _db.dispose()
        _db = None
        logger.info("database_closed")
