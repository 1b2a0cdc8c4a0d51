"""Outcomes produced by the movie service.

Each outcome carries everything a presentation layer needs to build a
response, plus the HTTP status it corresponds to. Renderers pick a
view by outcome type.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from mvcmovie.catalog.entities import Movie, Review


class Outcome:
    """Base class for service outcomes."""

    status_code: ClassVar[int] = 200


@dataclass(frozen=True)
class MovieSummary:
    """Row of the movie list."""

    id: int
    title: str
    genre: str

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieSummary":
        return cls(id=movie.id, title=movie.title, genre=movie.genre)


@dataclass(frozen=True)
class MovieListOutcome(Outcome):
    """Render the list of every movie."""

    movies: list[MovieSummary]
    heading: str = "Movies"


@dataclass(frozen=True)
class MovieFormOutcome(Outcome):
    """Render a create or edit form, optionally with field errors.

    Attributes:
        heading: Page heading ("Add a Movie" or "Edit Movie").
        action: URL the form posts to.
        title: Value pre-filled in the Title field.
        genre: Value pre-filled in the Genre field.
        errors: Field name to message for rejected fields.
        movie_id: Id of the edited movie, None for creation.
    """

    heading: str
    action: str
    title: str = ""
    genre: str = ""
    errors: dict[str, str] = field(default_factory=dict)
    movie_id: int | None = None


@dataclass(frozen=True)
class MovieDetailsOutcome(Outcome):
    """Render one movie with its reviews.

    Attributes:
        movie: The movie as stored.
        reviews: Reviews owned by the movie.
        review_errors: Field errors from a rejected review submission.
        review_content: Content to pre-fill after a rejected submission.
        review_rating: Rating to pre-fill after a rejected submission.
    """

    movie: Movie
    reviews: list[Review] = field(default_factory=list)
    review_errors: dict[str, str] = field(default_factory=dict)
    review_content: str = ""
    review_rating: str = ""
    heading: str = "Movie Details"

    @property
    def title_line(self) -> str:
        return f"Title: {self.movie.title}"

    @property
    def genre_line(self) -> str:
        return f"Genre: {self.movie.genre}"


@dataclass(frozen=True)
class NotFoundOutcome(Outcome):
    """The requested movie or review does not exist."""

    status_code: ClassVar[int] = 404

    entity: str
    entity_id: int

    @property
    def message(self) -> str:
        return f"{self.entity} {self.entity_id} was not found."


@dataclass(frozen=True)
class ErrorOutcome(Outcome):
    """The store could not complete the request."""

    status_code: ClassVar[int] = 503

    message: str = "The catalog is temporarily unavailable. Please try again."
