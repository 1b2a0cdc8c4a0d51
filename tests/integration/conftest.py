"""Shared fixtures for integration tests.

Builds a fresh application per test with ``get_database`` overridden
by the isolated SQLite database from the root conftest, and drives
it through ``httpx.AsyncClient``.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from mvcmovie.api.main import create_app
from mvcmovie.database.connection import DatabaseConnection, get_database
from mvcmovie.database.gateway import SqlAlchemyMovieGateway

# ---------------------------------------------------------------------------
# Auto-mark all tests in this directory as "integration"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app(db: DatabaseConnection) -> FastAPI:
    """Application bound to the isolated test database."""
    application = create_app()
    application.dependency_overrides[get_database] = lambda: db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide an ``httpx.AsyncClient`` wired to the app."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def store(db: DatabaseConnection) -> SqlAlchemyMovieGateway:
    """Direct gateway access to arrange and inspect the stored data."""
    return SqlAlchemyMovieGateway(db)
