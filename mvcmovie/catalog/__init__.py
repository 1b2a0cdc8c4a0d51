"""Catalog domain: entities, errors, field rules and the gateway interface."""

from mvcmovie.catalog.entities import Movie, Review
from mvcmovie.catalog.exceptions import (
    CatalogError,
    EntityNotFoundError,
    EntityValidationError,
    IntegrityViolationError,
    StorageError,
)
from mvcmovie.catalog.gateway import MovieGateway

__all__ = [
    "Movie",
    "Review",
    "MovieGateway",
    "CatalogError",
    "EntityNotFoundError",
    "EntityValidationError",
    "IntegrityViolationError",
    "StorageError",
]
