"""SQLAlchemy ORM models for the MvcMovie catalog.

Usage:
    from mvcmovie.database.models import Base, MovieRecord, ReviewRecord

Tables:
    - movies: Catalog movies
    - reviews: Reviews owned by a movie
"""

from mvcmovie.database.models.base import Base, TimestampMixin
from mvcmovie.database.models.movie import MovieRecord
from mvcmovie.database.models.review import ReviewRecord

__all__ = [
    "Base",
    "TimestampMixin",
    "MovieRecord",
    "ReviewRecord",
]
