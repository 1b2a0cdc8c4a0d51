"""Database package for the MvcMovie catalog.

Provides connection management, ORM models, repositories and the
gateway implementations.

Usage:
    from mvcmovie.database import SqlAlchemyMovieGateway, get_database

    gateway = SqlAlchemyMovieGateway(get_database())
    movies = gateway.list_movies()
"""

from mvcmovie.database.connection import (
    DatabaseConnection,
    close_database,
    get_database,
)
from mvcmovie.database.gateway import SqlAlchemyMovieGateway
from mvcmovie.database.memory import InMemoryMovieGateway
from mvcmovie.database.models import Base, MovieRecord, ReviewRecord

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_database",
    "close_database",
    # Gateways
    "SqlAlchemyMovieGateway",
    "InMemoryMovieGateway",
    # Models
    "Base",
    "MovieRecord",
    "ReviewRecord",
]
