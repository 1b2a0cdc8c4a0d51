"""Review pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from mvcmovie.api.dependencies import MovieServiceDep
from mvcmovie.api.rendering import render_outcome

router = APIRouter(
    prefix="/reviews",
    tags=["Reviews"],
    default_response_class=HTMLResponse,
)


@router.post("/delete/{review_id}", summary="Delete review")
def delete(review_id: int, request: Request, service: MovieServiceDep) -> HTMLResponse:
    """Delete one review and render its movie, or 404."""
    return render_outcome(request, service.delete_review(review_id))
