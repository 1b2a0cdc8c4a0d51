"""SQLAlchemy implementation of the catalog gateway.

Every public method runs in its own transaction. Rows touched by a
write on a movie are locked with SELECT ... FOR UPDATE so concurrent
update/delete/review writes on the same movie are serialized. SQLite
ignores the lock and only serializes the write statements themselves,
so updates and deletes check their row counts: a movie removed by a
concurrent delete is reported as not found.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from mvcmovie.catalog.entities import Movie, Review
from mvcmovie.catalog.exceptions import (
    EntityNotFoundError,
    IntegrityViolationError,
    StorageError,
)
from mvcmovie.catalog.validation import clean_movie_fields, clean_review_fields
from mvcmovie.database.connection import DatabaseConnection
from mvcmovie.database.models import MovieRecord, ReviewRecord
from mvcmovie.database.repositories import MovieRepository, ReviewRepository
from mvcmovie.utils.logger import get_logger

logger = get_logger(__name__)


class SqlAlchemyMovieGateway:
    """MovieGateway backed by a relational database.

    Attributes:
        _db: Connection providing transactional sessions.
    """

    def __init__(self, db: DatabaseConnection) -> None:
        """Initialize gateway.

        Args:
            db: Database connection to run transactions on.
        """
        self._db = db

    @contextmanager
    def _transaction(self, operation: str) -> Generator[Session, None, None]:
        """Run one gateway operation in a transaction.

        Storage exceptions are translated into catalog errors after the
        session has rolled back, so callers never see driver details.

        Args:
            operation: Operation name used in log events.

        Yields:
            Session bound to the transaction.
        """
        try:
            with self._db.session() as session:
                yield session
        except IntegrityError as exc:
            logger.warning("integrity_violation", operation=operation, error=str(exc.orig))
            raise IntegrityViolationError(f"{operation} violates referential integrity") from exc
        except SQLAlchemyError as exc:
            logger.error("storage_failure", operation=operation, error=str(exc))
            raise StorageError(f"{operation} failed") from exc

    @staticmethod
    def _require_movie(repo: MovieRepository, movie_id: int, lock: bool = False) -> MovieRecord:
        movie = repo.get_by_id(movie_id, for_update=lock)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return movie

    # =========================================================================
    # MOVIES
    # =========================================================================

    def list_movies(self) -> list[Movie]:
        """Return every movie ordered by id."""
        with self._transaction("list_movies") as session:
            return [m.to_entity() for m in MovieRepository(session).get_all()]

    def get_movie(self, movie_id: int) -> Movie:
        """Return one movie.

        Raises:
            EntityNotFoundError: If no movie has this id.
        """
        with self._transaction("get_movie") as session:
            return self._require_movie(MovieRepository(session), movie_id).to_entity()

    def create_movie(self, title: str, genre: str) -> Movie:
        """Persist a new movie.

        Args:
            title: Movie title, must be non-empty.
            genre: Genre label, must be non-empty.

        Returns:
            The stored movie with its generated id.

        Raises:
            EntityValidationError: If title or genre is invalid.
        """
        title, genre = clean_movie_fields(title, genre)
        with self._transaction("create_movie") as session:
            movie = MovieRepository(session).create(MovieRecord(title=title, genre=genre))
            entity = movie.to_entity()
        logger.info("movie_created", movie_id=entity.id, title=entity.title)
        return entity

    def update_movie(self, movie_id: int, title: str, genre: str) -> Movie:
        """Replace a movie's title and genre.

        Raises:
            EntityNotFoundError: If no movie has this id.
            EntityValidationError: If title or genre is invalid.
        """
        with self._transaction("update_movie") as session:
            repo = MovieRepository(session)
            self._require_movie(repo, movie_id, lock=True)
            title, genre = clean_movie_fields(title, genre)
            # A delete committed since the read leaves nothing to update.
            if repo.update_by_id(movie_id, title, genre) == 0:
                raise EntityNotFoundError("Movie", movie_id)
        entity = Movie(id=movie_id, title=title, genre=genre)
        logger.info("movie_updated", movie_id=movie_id, title=entity.title, genre=entity.genre)
        return entity

    def delete_movie(self, movie_id: int) -> Movie:
        """Remove a movie and all of its reviews atomically.

        Exactly one movie row must be removed, otherwise the whole
        transaction is rolled back.

        Returns:
            The movie as it was before deletion.

        Raises:
            EntityNotFoundError: If no movie has this id.
            IntegrityViolationError: If the delete removed more than one row.
        """
        with self._transaction("delete_movie") as session:
            movies = MovieRepository(session)
            entity = self._require_movie(movies, movie_id, lock=True).to_entity()
            reviews_removed = ReviewRepository(session).delete_by_movie_id(movie_id)
            movies_removed = movies.delete_by_id(movie_id)
            if movies_removed == 0:
                raise EntityNotFoundError("Movie", movie_id)
            if movies_removed != 1:
                raise IntegrityViolationError(
                    f"delete_movie affected {movies_removed} rows for movie {movie_id}"
                )
        logger.info("movie_deleted", movie_id=movie_id, reviews_removed=reviews_removed)
        return entity

    # =========================================================================
    # REVIEWS
    # =========================================================================

    def create_review(self, movie_id: int, content: str, rating: int) -> Review:
        """Attach a new review to an existing movie.

        Raises:
            EntityNotFoundError: If the movie does not exist.
            EntityValidationError: If content or rating is invalid.
            IntegrityViolationError: If the store rejects the movie reference.
        """
        with self._transaction("create_review") as session:
            self._require_movie(MovieRepository(session), movie_id, lock=True)
            content, rating = clean_review_fields(content, rating)
            review = ReviewRepository(session).create(
                ReviewRecord(movie_id=movie_id, content=content, rating=rating)
            )
            entity = review.to_entity()
        logger.info("review_created", review_id=entity.id, movie_id=movie_id, rating=rating)
        return entity

    def list_reviews_for_movie(self, movie_id: int) -> list[Review]:
        """Return the reviews of one movie ordered by id.

        Raises:
            EntityNotFoundError: If the movie does not exist.
        """
        with self._transaction("list_reviews_for_movie") as session:
            self._require_movie(MovieRepository(session), movie_id)
            return [r.to_entity() for r in ReviewRepository(session).get_by_movie_id(movie_id)]

    def get_review(self, review_id: int) -> Review:
        """Return one review.

        Raises:
            EntityNotFoundError: If no review has this id.
        """
        with self._transaction("get_review") as session:
            review = ReviewRepository(session).get_by_id(review_id)
            if review is None:
                raise EntityNotFoundError("Review", review_id)
            return review.to_entity()

    def delete_review(self, review_id: int) -> Review:
        """Remove a single review.

        Raises:
            EntityNotFoundError: If no review has this id.
        """
        with self._transaction("delete_review") as session:
            repo = ReviewRepository(session)
            review = repo.get_by_id(review_id, for_update=True)
            if review is None:
                raise EntityNotFoundError("Review", review_id)
            entity = review.to_entity()
            repo.delete(review)
        logger.info("review_deleted", review_id=review_id, movie_id=entity.movie_id)
        return entity
