"""Unit tests for SqlAlchemyMovieGateway specifics.

Covers storage error translation, transaction rollback on a failed
cascade delete and the foreign key enforcement of the schema.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from mvcmovie.catalog.exceptions import (
    CatalogError,
    EntityNotFoundError,
    IntegrityViolationError,
    StorageError,
)
from mvcmovie.database.connection import DatabaseConnection
from mvcmovie.database.gateway import SqlAlchemyMovieGateway
from mvcmovie.database.models import ReviewRecord
from mvcmovie.database.repositories import MovieRepository, ReviewRepository

pytestmark = pytest.mark.unit


# =========================================================================
# Error translation
# =========================================================================


class TestErrorTranslation:
    """Driver exceptions never leak out of the gateway."""

    @staticmethod
    def test_operational_error_becomes_storage_error(sql_gateway: SqlAlchemyMovieGateway) -> None:
        """A broken connection surfaces as StorageError."""
        with (
            patch.object(
                MovieRepository,
                "get_all",
                side_effect=OperationalError("SELECT", {}, Exception("disk I/O error")),
            ),
            pytest.raises(StorageError) as exc_info,
        ):
            sql_gateway.list_movies()

        assert isinstance(exc_info.value, CatalogError)
        assert isinstance(exc_info.value.__cause__, OperationalError)

    @staticmethod
    def test_integrity_error_becomes_integrity_violation(
        sql_gateway: SqlAlchemyMovieGateway,
    ) -> None:
        """A rejected review insert surfaces as IntegrityViolationError."""
        movie = sql_gateway.create_movie("Spaceballs", "Comedy")

        with (
            patch.object(
                ReviewRepository,
                "create",
                side_effect=IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed")),
            ),
            pytest.raises(IntegrityViolationError),
        ):
            sql_gateway.create_review(movie.id, "Great", 4)

        assert sql_gateway.list_reviews_for_movie(movie.id) == []


# =========================================================================
# Cascade delete atomicity
# =========================================================================


class TestDeleteAtomicity:
    """The two-table delete commits together or not at all."""

    @staticmethod
    @pytest.mark.parametrize(
        ("rows_removed", "error"),
        [(0, EntityNotFoundError), (2, IntegrityViolationError)],
    )
    def test_unexpected_rowcount_rolls_back_review_delete(
        sql_gateway: SqlAlchemyMovieGateway, rows_removed: int, error: type[Exception]
    ) -> None:
        """Unless exactly one movie row is removed, its reviews survive too."""
        movie = sql_gateway.create_movie("Spaceballs", "Comedy")
        great = sql_gateway.create_review(movie.id, "Great", 4)
        just_ok = sql_gateway.create_review(movie.id, "Just ok", 2)

        with (
            patch.object(MovieRepository, "delete_by_id", return_value=rows_removed),
            pytest.raises(error),
        ):
            sql_gateway.delete_movie(movie.id)

        assert sql_gateway.get_movie(movie.id) == movie
        assert sql_gateway.list_reviews_for_movie(movie.id) == [great, just_ok]

    @staticmethod
    def test_failure_after_review_delete_rolls_back(sql_gateway: SqlAlchemyMovieGateway) -> None:
        """A storage failure mid-delete leaves both tables untouched."""
        movie = sql_gateway.create_movie("Spaceballs", "Comedy")
        review = sql_gateway.create_review(movie.id, "Great", 4)

        with (
            patch.object(
                MovieRepository,
                "delete_by_id",
                side_effect=OperationalError("DELETE", {}, Exception("database is locked")),
            ),
            pytest.raises(StorageError),
        ):
            sql_gateway.delete_movie(movie.id)

        assert sql_gateway.get_review(review.id) == review


# =========================================================================
# Schema
# =========================================================================


class TestSchemaConstraints:
    """Constraints enforced by the database itself."""

    @staticmethod
    def test_foreign_key_rejects_dangling_review(db: DatabaseConnection) -> None:
        """SQLite enforces the movie reference."""
        with pytest.raises(IntegrityError), db.session() as session:
            session.add(ReviewRecord(movie_id=999, content="Orphan", rating=3))
            session.flush()

    @staticmethod
    def test_rating_check_constraint(db: DatabaseConnection, sql_gateway: SqlAlchemyMovieGateway) -> None:
        """Ratings outside the range are rejected below the gateway too."""
        movie = sql_gateway.create_movie("Spaceballs", "Comedy")

        with pytest.raises(IntegrityError), db.session() as session:
            session.add(ReviewRecord(movie_id=movie.id, content="Too good", rating=9))
            session.flush()

    @staticmethod
    def test_schema_creation_is_idempotent(db: DatabaseConnection) -> None:
        """Creating the schema twice keeps existing rows."""
        gateway = SqlAlchemyMovieGateway(db)
        movie = gateway.create_movie("Elf", "Holiday")

        db.create_schema()

        assert gateway.list_movies() == [movie]

    @staticmethod
    def test_check_connection(db: DatabaseConnection) -> None:
        """A reachable database reports True."""
        assert db.check_connection() is True

