"""Integration tests for the health check and metrics endpoints."""

from __future__ import annotations

from unittest.mock import patch

from httpx import AsyncClient

from mvcmovie.database.connection import DatabaseConnection


class TestHealthEndpoint:
    """GET /health."""

    @staticmethod
    async def test_healthy(client: AsyncClient) -> None:
        """Reachable database reports healthy."""
        resp = await client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["database"]["connected"] is True
        assert body["database"]["url"].startswith("sqlite:///")
        assert "version" in body
        assert "timestamp" in body

    @staticmethod
    async def test_degraded(client: AsyncClient) -> None:
        """Unreachable database reports degraded, still 200."""
        with patch.object(DatabaseConnection, "check_connection", return_value=False):
            resp = await client.get("/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "degraded"
        assert resp.json()["database"]["connected"] is False


class TestMetricsEndpoint:
    """GET /metrics on the full application."""

    @staticmethod
    async def test_movie_routes_use_templates(client: AsyncClient) -> None:
        """Request metrics are labelled with route templates, not ids."""
        await client.get("/movies/12345")

        resp = await client.get("/metrics/")

        assert resp.status_code == 200
        assert 'path="/movies/{movie_id}"' in resp.text
        assert 'path="/movies/12345"' not in resp.text
