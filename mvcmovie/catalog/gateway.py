"""Persistence interface consumed by the movie service.

Any object implementing MovieGateway can back the catalog. The
SQLAlchemy implementation lives in mvcmovie.database.gateway and an
in-memory one in mvcmovie.database.memory.
"""

from typing import Protocol

from mvcmovie.catalog.entities import Movie, Review


class MovieGateway(Protocol):
    """CRUD over movies and their reviews with cascading movie delete.

    Every method either completes fully or leaves the store untouched.
    Failures are reported with the exceptions in
    mvcmovie.catalog.exceptions.
    """

    def list_movies(self) -> list[Movie]:
        """Return every movie ordered by id."""
        ...

    def get_movie(self, movie_id: int) -> Movie:
        """Return one movie or raise EntityNotFoundError."""
        ...

    def create_movie(self, title: str, genre: str) -> Movie:
        """Persist a new movie or raise EntityValidationError."""
        ...

    def update_movie(self, movie_id: int, title: str, genre: str) -> Movie:
        """Replace a movie's title and genre."""
        ...

    def delete_movie(self, movie_id: int) -> Movie:
        """Remove a movie together with all of its reviews."""
        ...

    def create_review(self, movie_id: int, content: str, rating: int) -> Review:
        """Attach a new review to an existing movie."""
        ...

    def list_reviews_for_movie(self, movie_id: int) -> list[Review]:
        """Return the reviews of one movie ordered by id."""
        ...

    def get_review(self, review_id: int) -> Review:
        """Return one review or raise EntityNotFoundError."""
        ...

    def delete_review(self, review_id: int) -> Review:
        """Remove a single review."""
        ...
