"""Review table.

Each review belongs to exactly one movie (many-to-one).
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mvcmovie.catalog.entities import Review
from mvcmovie.catalog.validation import MAX_RATING, MIN_RATING
from mvcmovie.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from mvcmovie.database.models.movie import MovieRecord


class ReviewRecord(Base, TimestampMixin):
    """Stored review row.

    Attributes:
        id: Primary key, never reused (AUTOINCREMENT on SQLite).
        movie_id: Foreign key to movies.
        content: Free-text comment.
        rating: Score between MIN_RATING and MAX_RATING.
    """

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    movie: Mapped["MovieRecord"] = relationship(back_populates="reviews")

    __table_args__ = (
        CheckConstraint(
            f"rating BETWEEN {MIN_RATING} AND {MAX_RATING}",
            name="rating_range",
        ),
        {"sqlite_autoincrement": True},
    )

    def to_entity(self) -> Review:
        """Detach the row into an immutable Review value."""
        return Review(
            id=self.id,
            movie_id=self.movie_id,
            content=self.content,
            rating=self.rating,
        )

    def __repr__(self) -> str:
        return f"<ReviewRecord(id={self.id}, movie_id={self.movie_id}, rating={self.rating})>"
