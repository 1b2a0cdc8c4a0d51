"""Movie repository.

Provides CRUD operations for catalog movies.
"""

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from mvcmovie.database.models import MovieRecord
from mvcmovie.database.repositories.base import BaseRepository


class MovieRepository(BaseRepository[MovieRecord]):
    """Repository for MovieRecord operations."""

    model = MovieRecord

    def __init__(self, session: Session) -> None:
        """Initialize movie repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def update_by_id(self, movie_id: int, title: str, genre: str) -> int:
        """Overwrite title and genre with a single statement.

        Loaded copies of the row in this session are refreshed too.

        Args:
            movie_id: Movie primary key.
            title: New title.
            genre: New genre.

        Returns:
            Number of rows changed, 0 when the movie is gone.
        """
        stmt = (
            update(MovieRecord)
            .where(MovieRecord.id == movie_id)
            .values(title=title, genre=genre)
        )
        result = self._session.execute(stmt, execution_options={"synchronize_session": "fetch"})
        return result.rowcount

    def delete_by_id(self, movie_id: int) -> int:
        """Delete a movie row with a single statement.

        Args:
            movie_id: Movie primary key.

        Returns:
            Number of rows removed.
        """
        stmt = delete(MovieRecord).where(MovieRecord.id == movie_id)
        result = self._session.execute(stmt, execution_options={"synchronize_session": False})
        return result.rowcount
