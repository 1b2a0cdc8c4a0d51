"""Review repository.

Provides CRUD and per-movie queries for reviews.
"""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from mvcmovie.database.models import ReviewRecord
from mvcmovie.database.repositories.base import BaseRepository


class ReviewRepository(BaseRepository[ReviewRecord]):
    """Repository for ReviewRecord operations."""

    model = ReviewRecord

    def __init__(self, session: Session) -> None:
        """Initialize review repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_movie_id(self, movie_id: int) -> list[ReviewRecord]:
        """Get all reviews of a movie.

        Args:
            movie_id: Movie primary key.

        Returns:
            Reviews ordered by id.
        """
        stmt = (
            select(ReviewRecord)
            .where(ReviewRecord.movie_id == movie_id)
            .order_by(ReviewRecord.id)
        )
        return list(self._session.scalars(stmt).all())

    def delete_by_movie_id(self, movie_id: int) -> int:
        """Delete every review of a movie with a single statement.

        Args:
            movie_id: Movie primary key.

        Returns:
            Number of reviews removed.
        """
        stmt = delete(ReviewRecord).where(ReviewRecord.movie_id == movie_id)
        result = self._session.execute(stmt, execution_options={"synchronize_session": False})
        return result.rowcount
