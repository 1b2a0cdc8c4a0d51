"""Movie pages.

HTML endpoints for listing, creating, editing and deleting movies,
and for adding reviews to a movie. Form fields keep their original
capitalized names (``Title``, ``Genre``, ``Content``, ``Rating``).
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from mvcmovie.api.dependencies import MovieServiceDep
from mvcmovie.api.rendering import render_outcome

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    default_response_class=HTMLResponse,
)

TitleField = Annotated[str, Form(alias="Title")]
GenreField = Annotated[str, Form(alias="Genre")]


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get("", summary="List movies")
def index(request: Request, service: MovieServiceDep) -> HTMLResponse:
    """Render every movie's title and genre."""
    return render_outcome(request, service.index())


@router.get("/new", summary="New movie form")
def new_form(request: Request, service: MovieServiceDep) -> HTMLResponse:
    """Render the empty creation form."""
    return render_outcome(request, service.new_form())


@router.post("", summary="Create movie")
def create(
    request: Request,
    service: MovieServiceDep,
    title: TitleField = "",
    genre: GenreField = "",
) -> HTMLResponse:
    """Create a movie and show its details, or redisplay the form.

    Args:
        request: Current request.
        service: Movie service.
        title: Submitted ``Title`` field.
        genre: Submitted ``Genre`` field.

    Returns:
        Details page (200) or the form with errors (200).
    """
    return render_outcome(request, service.create(title, genre))


@router.get("/{movie_id}", summary="Show movie")
def show(movie_id: int, request: Request, service: MovieServiceDep) -> HTMLResponse:
    """Render one movie with its reviews, or 404."""
    return render_outcome(request, service.show(movie_id))


@router.get("/{movie_id}/edit", summary="Edit movie form")
def edit_form(movie_id: int, request: Request, service: MovieServiceDep) -> HTMLResponse:
    """Render the edit form pre-filled with current values, or 404."""
    return render_outcome(request, service.edit_form(movie_id))


@router.post("/{movie_id}", summary="Update movie")
def update(
    movie_id: int,
    request: Request,
    service: MovieServiceDep,
    title: TitleField = "",
    genre: GenreField = "",
) -> HTMLResponse:
    """Apply the edit form and show the updated movie.

    Args:
        movie_id: Movie primary key.
        request: Current request.
        service: Movie service.
        title: Submitted ``Title`` field.
        genre: Submitted ``Genre`` field.

    Returns:
        Details page (200), the form with errors (200) or 404.
    """
    return render_outcome(request, service.update(movie_id, title, genre))


@router.post("/delete/{movie_id}", summary="Delete movie")
def delete(movie_id: int, request: Request, service: MovieServiceDep) -> HTMLResponse:
    """Delete a movie with its reviews and render the refreshed list."""
    return render_outcome(request, service.delete(movie_id))


@router.post("/{movie_id}/reviews", summary="Add review")
def add_review(
    movie_id: int,
    request: Request,
    service: MovieServiceDep,
    content: Annotated[str, Form(alias="Content")] = "",
    rating: Annotated[str, Form(alias="Rating")] = "",
) -> HTMLResponse:
    """Attach a review to a movie and render the movie again."""
    return render_outcome(request, service.add_review(movie_id, content, rating))
