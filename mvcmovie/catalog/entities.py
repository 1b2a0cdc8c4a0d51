"""Catalog entity values.

Movies and reviews as handed out by every gateway. They are frozen
snapshots, detached from any database session.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """A catalog movie.

    Attributes:
        id: Store-generated identifier, never reused.
        title: Non-empty title.
        genre: Non-empty genre label.
    """

    id: int
    title: str
    genre: str


@dataclass(frozen=True)
class Review:
    """A review owned by exactly one movie.

    Attributes:
        id: Store-generated identifier, never reused.
        movie_id: Identifier of the owning movie.
        content: Free-text comment.
        rating: Integer score between MIN_RATING and MAX_RATING.
    """

    id: int
    movie_id: int
    content: str
    rating: int
