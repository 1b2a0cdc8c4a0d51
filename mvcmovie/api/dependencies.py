"""FastAPI dependencies wiring the service to its gateway.

Tests replace ``get_database`` or ``get_gateway`` through
``app.dependency_overrides`` to run against an isolated store.
"""

from typing import Annotated

from fastapi import Depends

from mvcmovie.catalog.gateway import MovieGateway
from mvcmovie.database.connection import DatabaseConnection, get_database
from mvcmovie.database.gateway import SqlAlchemyMovieGateway
from mvcmovie.services.movies import MovieService

DatabaseDep = Annotated[DatabaseConnection, Depends(get_database)]


def get_gateway(db: DatabaseDep) -> MovieGateway:
    """Provide the SQLAlchemy gateway bound to the application database."""
    return SqlAlchemyMovieGateway(db)


def get_movie_service(gateway: Annotated[MovieGateway, Depends(get_gateway)]) -> MovieService:
    """Provide a MovieService for one request."""
    return MovieService(gateway)


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
