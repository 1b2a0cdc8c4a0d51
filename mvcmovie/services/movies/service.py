"""Movie operations service.

Translates user intents (list, create, edit, update, delete, review)
into gateway calls and returns outcomes for a presentation layer. The
service keeps no state between calls; the gateway is the only place
where data is read or written.
"""

from mvcmovie.catalog.exceptions import (
    CatalogError,
    EntityNotFoundError,
    EntityValidationError,
)
from mvcmovie.catalog.gateway import MovieGateway
from mvcmovie.services.movies.commands import parse_movie_command, parse_review_command
from mvcmovie.services.movies.outcomes import (
    ErrorOutcome,
    MovieDetailsOutcome,
    MovieFormOutcome,
    MovieListOutcome,
    MovieSummary,
    NotFoundOutcome,
    Outcome,
)
from mvcmovie.utils.logger import get_logger

logger = get_logger(__name__)

NEW_MOVIE_HEADING = "Add a Movie"
EDIT_MOVIE_HEADING = "Edit Movie"
MOVIES_PATH = "/movies"


class MovieService:
    """Orchestrates movie and review operations.

    Attributes:
        _gateway: Persistence gateway all reads and writes go through.
    """

    def __init__(self, gateway: MovieGateway) -> None:
        """Initialize service.

        Args:
            gateway: Persistence gateway implementation.
        """
        self._gateway = gateway

    # =========================================================================
    # MOVIES
    # =========================================================================

    def index(self) -> Outcome:
        """List every movie."""
        try:
            movies = self._gateway.list_movies()
        except CatalogError as exc:
            return self._unexpected("index", exc)
        return MovieListOutcome(movies=[MovieSummary.from_movie(m) for m in movies])

    def new_form(self) -> Outcome:
        """Show an empty creation form. Does not touch storage."""
        return MovieFormOutcome(heading=NEW_MOVIE_HEADING, action=MOVIES_PATH)

    def create(self, title: str | None, genre: str | None) -> Outcome:
        """Create a movie from submitted form values.

        Invalid input redisplays the creation form with errors and
        stores nothing.

        Args:
            title: Submitted title.
            genre: Submitted genre.

        Returns:
            MovieDetailsOutcome on success, MovieFormOutcome on invalid input.
        """
        parsed = parse_movie_command(title, genre)
        if not parsed.is_valid:
            return self._rejected_form(NEW_MOVIE_HEADING, MOVIES_PATH, title, genre, parsed.errors)

        command = parsed.command
        try:
            movie = self._gateway.create_movie(command.title, command.genre)
        except EntityValidationError as exc:
            return self._rejected_form(NEW_MOVIE_HEADING, MOVIES_PATH, title, genre, exc.errors)
        except CatalogError as exc:
            return self._unexpected("create", exc)

        return MovieDetailsOutcome(movie=movie)

    def show(self, movie_id: int) -> Outcome:
        """Show one movie and its reviews."""
        try:
            movie = self._gateway.get_movie(movie_id)
            reviews = self._gateway.list_reviews_for_movie(movie_id)
        except EntityNotFoundError as exc:
            return self._not_found(exc)
        except CatalogError as exc:
            return self._unexpected("show", exc)
        return MovieDetailsOutcome(movie=movie, reviews=reviews)

    def edit_form(self, movie_id: int) -> Outcome:
        """Show the edit form pre-filled with the movie's current values."""
        try:
            movie = self._gateway.get_movie(movie_id)
        except EntityNotFoundError as exc:
            return self._not_found(exc)
        except CatalogError as exc:
            return self._unexpected("edit_form", exc)

        return MovieFormOutcome(
            heading=EDIT_MOVIE_HEADING,
            action=f"{MOVIES_PATH}/{movie.id}",
            title=movie.title,
            genre=movie.genre,
            movie_id=movie.id,
        )

    def update(self, movie_id: int, title: str | None, genre: str | None) -> Outcome:
        """Replace a movie's title and genre.

        Args:
            movie_id: Movie to update.
            title: Submitted title.
            genre: Submitted genre.

        Returns:
            MovieDetailsOutcome with the new values, MovieFormOutcome on
            invalid input, NotFoundOutcome if the movie is gone.
        """
        action = f"{MOVIES_PATH}/{movie_id}"
        parsed = parse_movie_command(title, genre)
        try:
            if not parsed.is_valid:
                # Missing movies win over invalid input.
                self._gateway.get_movie(movie_id)
                return self._rejected_form(
                    EDIT_MOVIE_HEADING, action, title, genre, parsed.errors, movie_id
                )
            command = parsed.command
            movie = self._gateway.update_movie(movie_id, command.title, command.genre)
            reviews = self._gateway.list_reviews_for_movie(movie_id)
        except EntityNotFoundError as exc:
            return self._not_found(exc)
        except EntityValidationError as exc:
            return self._rejected_form(EDIT_MOVIE_HEADING, action, title, genre, exc.errors, movie_id)
        except CatalogError as exc:
            return self._unexpected("update", exc)

        return MovieDetailsOutcome(movie=movie, reviews=reviews)

    def delete(self, movie_id: int) -> Outcome:
        """Delete a movie with its reviews and show the refreshed list.

        Deleting an unknown id is reported as not found rather than
        treated as already done.
        """
        try:
            self._gateway.delete_movie(movie_id)
        except EntityNotFoundError as exc:
            return self._not_found(exc)
        except CatalogError as exc:
            return self._unexpected("delete", exc)
        return self.index()

    # =========================================================================
    # REVIEWS
    # =========================================================================

    def add_review(self, movie_id: int, content: str | None, rating: str | int | None) -> Outcome:
        """Attach a review to a movie and show the movie again.

        Args:
            movie_id: Movie being reviewed.
            content: Submitted review text.
            rating: Submitted rating.

        Returns:
            MovieDetailsOutcome (with review errors on invalid input) or
            NotFoundOutcome if the movie does not exist.
        """
        parsed = parse_review_command(content, rating)
        try:
            movie = self._gateway.get_movie(movie_id)
            errors = parsed.errors
            if parsed.is_valid:
                command = parsed.command
                try:
                    self._gateway.create_review(movie_id, command.content, command.rating)
                except EntityValidationError as exc:
                    errors = exc.errors
            reviews = self._gateway.list_reviews_for_movie(movie_id)
        except EntityNotFoundError as exc:
            return self._not_found(exc)
        except CatalogError as exc:
            return self._unexpected("add_review", exc)

        if errors:
            logger.info("review_rejected", movie_id=movie_id, errors=errors)
            return MovieDetailsOutcome(
                movie=movie,
                reviews=reviews,
                review_errors=errors,
                review_content=content or "",
                review_rating="" if rating is None else str(rating),
            )
        return MovieDetailsOutcome(movie=movie, reviews=reviews)

    def delete_review(self, review_id: int) -> Outcome:
        """Delete one review and show its movie."""
        try:
            review = self._gateway.delete_review(review_id)
        except EntityNotFoundError as exc:
            return self._not_found(exc)
        except CatalogError as exc:
            return self._unexpected("delete_review", exc)
        return self.show(review.movie_id)

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    @staticmethod
    def _rejected_form(
        heading: str,
        action: str,
        title: str | None,
        genre: str | None,
        errors: dict[str, str],
        movie_id: int | None = None,
    ) -> MovieFormOutcome:
        logger.info("movie_form_rejected", action=action, errors=errors)
        return MovieFormOutcome(
            heading=heading,
            action=action,
            title=title or "",
            genre=genre or "",
            errors=errors,
            movie_id=movie_id,
        )

    @staticmethod
    def _not_found(exc: EntityNotFoundError) -> NotFoundOutcome:
        logger.info("entity_not_found", entity=exc.entity, entity_id=exc.entity_id)
        return NotFoundOutcome(entity=exc.entity, entity_id=exc.entity_id)

    @staticmethod
    def _unexpected(operation: str, exc: CatalogError) -> ErrorOutcome:
        logger.error("operation_failed", operation=operation, error=str(exc))
        return ErrorOutcome()
