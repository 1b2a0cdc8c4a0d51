"""Movie operations: form parsing, outcomes and the orchestrating service."""

from mvcmovie.services.movies.commands import (
    MovieCommand,
    ParseResult,
    ReviewCommand,
    parse_movie_command,
    parse_review_command,
)
from mvcmovie.services.movies.outcomes import (
    ErrorOutcome,
    MovieDetailsOutcome,
    MovieFormOutcome,
    MovieListOutcome,
    MovieSummary,
    NotFoundOutcome,
    Outcome,
)
from mvcmovie.services.movies.service import MovieService

__all__ = [
    "MovieService",
    "MovieCommand",
    "ReviewCommand",
    "ParseResult",
    "parse_movie_command",
    "parse_review_command",
    "Outcome",
    "MovieSummary",
    "MovieListOutcome",
    "MovieFormOutcome",
    "MovieDetailsOutcome",
    "NotFoundOutcome",
    "ErrorOutcome",
]
