"""Shared pytest fixtures.

Every test gets its own store: a SQLite file under ``tmp_path`` or a
fresh in-memory gateway. Nothing is shared between tests.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from mvcmovie.catalog.gateway import MovieGateway
from mvcmovie.database.connection import DatabaseConnection
from mvcmovie.database.gateway import SqlAlchemyMovieGateway
from mvcmovie.database.memory import InMemoryMovieGateway


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables for reproducible tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_FORMAT", "json")


@pytest.fixture
def db(tmp_path: Path) -> Generator[DatabaseConnection, None, None]:
    """Isolated SQLite database with the catalog schema."""
    connection = DatabaseConnection(f"sqlite:///{tmp_path / 'mvcmovie.db'}")
    connection.create_schema()
    yield connection
    connection.dispose()


@pytest.fixture
def sql_gateway(db: DatabaseConnection) -> SqlAlchemyMovieGateway:
    """SQLAlchemy gateway over the isolated database."""
    return SqlAlchemyMovieGateway(db)


@pytest.fixture
def memory_gateway() -> InMemoryMovieGateway:
    """Fresh in-memory gateway."""
    return InMemoryMovieGateway()


@pytest.fixture(params=["sqlalchemy", "memory"])
def gateway(request: pytest.FixtureRequest) -> MovieGateway:
    """Each gateway implementation in turn, for contract tests."""
    if request.param == "sqlalchemy":
        return request.getfixturevalue("sql_gateway")
    return request.getfixturevalue("memory_gateway")
