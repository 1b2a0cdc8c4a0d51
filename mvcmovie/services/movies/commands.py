"""Typed commands parsed from submitted form fields.

Parsing never raises: callers receive a ParseResult holding either the
validated command or a field-to-message error mapping they can render
next to the form.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mvcmovie.catalog.validation import (
    CONTENT_MAX_LENGTH,
    GENRE_MAX_LENGTH,
    MAX_RATING,
    MIN_RATING,
    TITLE_MAX_LENGTH,
)

CommandT = TypeVar("CommandT", bound=BaseModel)

_LABELS = {
    "title": "Title",
    "genre": "Genre",
    "content": "Content",
    "rating": "Rating",
}


# =============================================================================
# COMMANDS
# =============================================================================


class MovieCommand(BaseModel):
    """Validated create/update request for a movie."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    genre: str = Field(min_length=1, max_length=GENRE_MAX_LENGTH)


class ReviewCommand(BaseModel):
    """Validated request to add a review to a movie."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    content: str = Field(default="", max_length=CONTENT_MAX_LENGTH)
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)


@dataclass(frozen=True)
class ParseResult(Generic[CommandT]):
    """Outcome of parsing a form into a command.

    Attributes:
        command: The validated command, None when parsing failed.
        errors: Field name to message for each rejected field.
    """

    command: CommandT | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Whether a command could be built."""
        return self.command is not None


# =============================================================================
# PARSERS
# =============================================================================


def parse_movie_command(title: str | None, genre: str | None) -> ParseResult[MovieCommand]:
    """Build a MovieCommand from raw form values.

    Args:
        title: Submitted ``Title`` field.
        genre: Submitted ``Genre`` field.

    Returns:
        ParseResult with the command or the validation errors.
    """
    try:
        return ParseResult(command=MovieCommand(title=title or "", genre=genre or ""))
    except ValidationError as exc:
        return ParseResult(errors=_collect_errors(exc))


def parse_review_command(content: str | None, rating: str | int | None) -> ParseResult[ReviewCommand]:
    """Build a ReviewCommand from raw form values.

    Args:
        content: Submitted ``Content`` field.
        rating: Submitted ``Rating`` field, usually a numeric string.

    Returns:
        ParseResult with the command or the validation errors.
    """
    try:
        return ParseResult(command=ReviewCommand(content=content or "", rating=rating))
    except ValidationError as exc:
        return ParseResult(errors=_collect_errors(exc))


def _collect_errors(exc: ValidationError) -> dict[str, str]:
    """Translate pydantic errors into one message per form field."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        name = str(error["loc"][0])
        if name in errors:
            continue
        errors[name] = _message_for(name, error["type"], error.get("ctx") or {})
    return errors


def _message_for(name: str, error_type: str, ctx: dict) -> str:
    label = _LABELS.get(name, name.capitalize())
    if name == "rating":
        return f"Rating must be between {MIN_RATING} and {MAX_RATING}"
    if error_type == "string_too_short":
        return f"{label} is required"
    if error_type == "string_too_long":
        return f"{label} must be at most {ctx.get('max_length')} characters"
    return f"{label} is invalid"
