"""Movie table.

Primary catalog entity. Reviews reference it through a foreign key;
the gateway removes them explicitly when a movie is deleted.
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mvcmovie.catalog.entities import Movie
from mvcmovie.catalog.validation import GENRE_MAX_LENGTH, TITLE_MAX_LENGTH
from mvcmovie.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from mvcmovie.database.models.review import ReviewRecord


class MovieRecord(Base, TimestampMixin):
    """Stored movie row.

    Attributes:
        id: Primary key, never reused (AUTOINCREMENT on SQLite).
        title: Movie title.
        genre: Genre label.
        reviews: Reviews owned by this movie.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    genre: Mapped[str] = mapped_column(String(GENRE_MAX_LENGTH), nullable=False)

    reviews: Mapped[list["ReviewRecord"]] = relationship(
        back_populates="movie",
        passive_deletes=True,
        order_by="ReviewRecord.id",
    )

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="title_not_empty"),
        CheckConstraint("length(genre) > 0", name="genre_not_empty"),
        {"sqlite_autoincrement": True},
    )

    def to_entity(self) -> Movie:
        """Detach the row into an immutable Movie value."""
        return Movie(id=self.id, title=self.title, genre=self.genre)

    def __repr__(self) -> str:
        return f"<MovieRecord(id={self.id}, title='{self.title}')>"
