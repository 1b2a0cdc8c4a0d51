"""Field rules shared by every gateway and by form parsing."""

from mvcmovie.catalog.exceptions import EntityValidationError

TITLE_MAX_LENGTH = 255
GENRE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 2000
MIN_RATING = 1
MAX_RATING = 5


def _check_required(errors: dict[str, str], field: str, label: str, value: str, max_length: int) -> None:
    if not value:
        errors[field] = f"{label} is required"
    elif len(value) > max_length:
        errors[field] = f"{label} must be at most {max_length} characters"


def movie_field_errors(title: str | None, genre: str | None) -> dict[str, str]:
    """Collect validation messages for a movie's title and genre.

    Args:
        title: Submitted title, already stripped.
        genre: Submitted genre, already stripped.

    Returns:
        Field name to message; empty when both fields are valid.
    """
    errors: dict[str, str] = {}
    _check_required(errors, "title", "Title", title or "", TITLE_MAX_LENGTH)
    _check_required(errors, "genre", "Genre", genre or "", GENRE_MAX_LENGTH)
    return errors


def review_field_errors(content: str | None, rating: int | None) -> dict[str, str]:
    """Collect validation messages for a review's content and rating."""
    errors: dict[str, str] = {}
    if content is not None and len(content) > CONTENT_MAX_LENGTH:
        errors["content"] = f"Content must be at most {CONTENT_MAX_LENGTH} characters"
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        errors["rating"] = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
    return errors


def clean_movie_fields(title: str | None, genre: str | None) -> tuple[str, str]:
    """Strip a movie's fields and raise if they are invalid.

    Raises:
        EntityValidationError: If title or genre is empty or too long.
    """
    title = (title or "").strip()
    genre = (genre or "").strip()
    errors = movie_field_errors(title, genre)
    if errors:
        raise EntityValidationError(errors)
    return title, genre


def clean_review_fields(content: str | None, rating: int | None) -> tuple[str, int]:
    """Normalize a review's fields and raise if they are invalid.

    Raises:
        EntityValidationError: If content is too long or rating out of range.
    """
    content = (content or "").strip()
    errors = review_field_errors(content, rating)
    if errors:
        raise EntityValidationError(errors)
    return content, rating
