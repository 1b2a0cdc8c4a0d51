"""Integration tests for the movie pages.

Tests cover:
- Listing, creating, editing and deleting movies over HTTP
- Form validation feedback
- Cascade delete of reviews
- 404 pages for unknown ids
"""

from __future__ import annotations

import re

import pytest
from httpx import AsyncClient

from mvcmovie.catalog.exceptions import EntityNotFoundError
from mvcmovie.database.gateway import SqlAlchemyMovieGateway

_MOVIE_LINK = re.compile(r'href="/movies/(\d+)/edit"')


def movie_id_from(html: str) -> int:
    """Extract the movie id from the edit link of a details page."""
    match = _MOVIE_LINK.search(html)
    assert match is not None, "no movie link in page"
    return int(match.group(1))


# ============================================================================
# List
# ============================================================================


class TestMovieList:
    """GET /movies."""

    @staticmethod
    async def test_list_contains_created_movies(client: AsyncClient) -> None:
        """Both created titles are listed, nothing else."""
        await client.post("/movies", data={"Title": "Spaceballs", "Genre": "Comedy"})
        await client.post("/movies", data={"Title": "Young Frankenstein", "Genre": "Comedy"})

        resp = await client.get("/movies")

        assert resp.status_code == 200
        assert "Spaceballs" in resp.text
        assert "Young Frankenstein" in resp.text
        assert "Elf" not in resp.text

    @staticmethod
    async def test_empty_list(client: AsyncClient) -> None:
        """An empty catalog still renders."""
        resp = await client.get("/movies")

        assert resp.status_code == 200
        assert "No movies yet." in resp.text

    @staticmethod
    async def test_root_redirects_to_list(client: AsyncClient) -> None:
        """/ sends the browser to /movies."""
        resp = await client.get("/")

        assert resp.status_code == 307
        assert resp.headers["location"] == "/movies"


# ============================================================================
# Create
# ============================================================================


class TestCreateMovie:
    """GET /movies/new and POST /movies."""

    @staticmethod
    async def test_new_form_posts_to_movies(client: AsyncClient) -> None:
        """The empty form targets the create endpoint."""
        resp = await client.get("/movies/new")

        assert resp.status_code == 200
        assert '<form method="post" action="/movies">' in resp.text
        assert 'name="Title"' in resp.text
        assert 'name="Genre"' in resp.text

    @staticmethod
    async def test_create_shows_details(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Creating a movie renders its details and stores it."""
        resp = await client.post(
            "/movies",
            data={"Title": "Back to the Future", "Genre": "Science Fiction"},
        )

        assert resp.status_code == 200
        assert "Movie Details" in resp.text
        assert "Title: Back to the Future" in resp.text
        assert "Genre: Science Fiction" in resp.text
        stored = store.get_movie(movie_id_from(resp.text))
        assert stored.genre == "Science Fiction"

    @staticmethod
    async def test_create_without_genre_redisplays_form(
        client: AsyncClient, store: SqlAlchemyMovieGateway
    ) -> None:
        """Missing genre keeps the title and reports the error."""
        resp = await client.post("/movies", data={"Title": "Spaceballs"})

        assert resp.status_code == 200
        assert '<form method="post" action="/movies">' in resp.text
        assert 'value="Spaceballs"' in resp.text
        assert "Genre is required" in resp.text
        assert store.list_movies() == []


# ============================================================================
# Show / Edit / Update
# ============================================================================


class TestEditMovie:
    """GET /movies/{id}, GET /movies/{id}/edit and POST /movies/{id}."""

    @staticmethod
    async def test_show_movie(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Details list the movie's reviews."""
        movie = store.create_movie("Spaceballs", "Comedy")
        store.create_review(movie.id, "Great", 4)

        resp = await client.get(f"/movies/{movie.id}")

        assert resp.status_code == 200
        assert "Title: Spaceballs" in resp.text
        assert "Great" in resp.text

    @staticmethod
    async def test_edit_form_prefilled(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Edit form posts to the movie and shows current values."""
        movie = store.create_movie("Goofy", "Comedy")

        resp = await client.get(f"/movies/{movie.id}/edit")

        assert resp.status_code == 200
        assert f'<form method="post" action="/movies/{movie.id}">' in resp.text
        assert 'value="Goofy"' in resp.text
        assert 'value="Comedy"' in resp.text

    @staticmethod
    async def test_update_replaces_genre(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """The old genre is gone from the response and the store."""
        movie = store.create_movie("Goofy", "Comedy")

        resp = await client.post(
            f"/movies/{movie.id}",
            data={"Title": "Goofy", "Genre": "Documentary"},
        )

        assert resp.status_code == 200
        assert "Goofy" in resp.text
        assert "Documentary" in resp.text
        assert "Comedy" not in resp.text
        assert store.get_movie(movie.id).genre == "Documentary"

    @staticmethod
    async def test_invalid_update_keeps_movie(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Blank title redisplays the edit form."""
        movie = store.create_movie("Goofy", "Comedy")

        resp = await client.post(f"/movies/{movie.id}", data={"Title": "", "Genre": "Documentary"})

        assert resp.status_code == 200
        assert "Title is required" in resp.text
        assert store.get_movie(movie.id).genre == "Comedy"

    @staticmethod
    @pytest.mark.parametrize("path", ["/movies/999", "/movies/999/edit"])
    async def test_unknown_movie_pages(client: AsyncClient, path: str) -> None:
        """Unknown ids render the not found page."""
        resp = await client.get(path)

        assert resp.status_code == 404
        assert "Movie 999 was not found." in resp.text

    @staticmethod
    async def test_update_unknown_movie(client: AsyncClient) -> None:
        """Updating an unknown id is a 404."""
        resp = await client.post("/movies/999", data={"Title": "Goofy", "Genre": "Documentary"})

        assert resp.status_code == 404

    @staticmethod
    async def test_non_numeric_id_rejected(client: AsyncClient) -> None:
        """Path ids must be integers."""
        resp = await client.get("/movies/abc")

        assert resp.status_code == 422


# ============================================================================
# Delete
# ============================================================================


class TestDeleteMovie:
    """POST /movies/delete/{id}."""

    @staticmethod
    async def test_delete_removes_only_target(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Deleting Goofy leaves Elf in the list."""
        goofy = store.create_movie("Goofy", "Comedy")
        store.create_movie("Elf", "Holiday")

        resp = await client.post(f"/movies/delete/{goofy.id}")

        assert resp.status_code == 200
        assert "Elf" in resp.text
        assert "Goofy" not in resp.text

        listing = await client.get("/movies")
        assert "Elf" in listing.text
        assert "Goofy" not in listing.text

    @staticmethod
    async def test_delete_cascades_to_reviews(client: AsyncClient, store: SqlAlchemyMovieGateway) -> None:
        """Reviews of a deleted movie are unfindable."""
        movie = store.create_movie("Spaceballs", "Comedy")
        reviews = [
            store.create_review(movie.id, "Great", 4),
            store.create_review(movie.id, "Just ok", 2),
        ]

        resp = await client.post(f"/movies/delete/{movie.id}")

        assert resp.status_code == 200
        for review in reviews:
            with pytest.raises(EntityNotFoundError):
                store.get_review(review.id)

    @staticmethod
    async def test_delete_unknown_movie(client: AsyncClient) -> None:
        """Deleting an unknown id is a 404."""
        resp = await client.post("/movies/delete/999")

        assert resp.status_code == 404
