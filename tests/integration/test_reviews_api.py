"""Integration tests for review submission and removal."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from mvcmovie.catalog.exceptions import EntityNotFoundError
from mvcmovie.database.gateway import SqlAlchemyMovieGateway


class TestAddReview:
    """POST /movies/{id}/reviews."""

    @staticmethod
    async def test_add_review(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """A submitted review is stored and shown."""
        movie = store.create_movie("Spaceballs", "Comedy")

        resp = await client.post(
            f"/movies/{movie.id}/reviews",
            data={"Content": "May the Schwartz be with you", "Rating": "5"},
        )

        assert resp.status_code == 200
        assert "May the Schwartz be with you" in resp.text
        [review] = store.list_reviews_for_movie(movie.id)
        assert review.rating == 5

    @staticmethod
    async def test_invalid_rating(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Out-of-range rating is reported and nothing is stored."""
        movie = store.create_movie("Spaceballs", "Comedy")

        resp = await client.post(
            f"/movies/{movie.id}/reviews",
            data={"Content": "Hmm", "Rating": "11"},
        )

        assert resp.status_code == 200
        assert "Rating must be between 1 and 5" in resp.text
        assert store.list_reviews_for_movie(movie.id) == []

    @staticmethod
    async def test_review_unknown_movie(client: AsyncClient) -> None:
        """Reviewing an unknown movie is a 404."""
        resp = await client.post("/movies/999/reviews", data={"Content": "Great", "Rating": "4"})

        assert resp.status_code == 404


class TestDeleteReview:
    """POST /reviews/delete/{id}."""

    @staticmethod
    async def test_delete_review(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Removing a review keeps the movie and its other reviews."""
        movie = store.create_movie("Spaceballs", "Comedy")
        great = store.create_review(movie.id, "Great", 4)
        just_ok = store.create_review(movie.id, "Just ok", 2)

        resp = await client.post(f"/reviews/delete/{great.id}")

        assert resp.status_code == 200
        assert "Title: Spaceballs" in resp.text
        assert "Just ok" in resp.text
        with pytest.raises(EntityNotFoundError):
            store.get_review(great.id)
        assert store.list_reviews_for_movie(movie.id) == [just_ok]

    @staticmethod
    async def test_delete_unknown_review(client: AsyncClient) -> None:
        """Unknown review id is a 404."""
        resp = await client.post("/reviews/delete/999")

        assert resp.status_code == 404
        assert "Review 999 was not found." in resp.text
