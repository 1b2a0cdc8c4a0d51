"""Data access repositories for the catalog tables."""

from mvcmovie.database.repositories.base import BaseRepository
from mvcmovie.database.repositories.movie import MovieRepository
from mvcmovie.database.repositories.review import ReviewRepository

__all__ = [
    "BaseRepository",
    "MovieRepository",
    "ReviewRepository",
]
