"""Turns service outcomes into HTML responses.

Each outcome type maps to one Jinja2 template; the response status
comes from the outcome itself.
"""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mvcmovie.services.movies import (
    ErrorOutcome,
    MovieDetailsOutcome,
    MovieFormOutcome,
    MovieListOutcome,
    NotFoundOutcome,
    Outcome,
)
from mvcmovie.settings import settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_TEMPLATE_BY_OUTCOME: dict[type[Outcome], str] = {
    MovieListOutcome: "movies/index.html",
    MovieFormOutcome: "movies/form.html",
    MovieDetailsOutcome: "movies/show.html",
    NotFoundOutcome: "errors/not_found.html",
    ErrorOutcome: "errors/unavailable.html",
}


def render_outcome(request: Request, outcome: Outcome) -> HTMLResponse:
    """Render an outcome with its template.

    Args:
        request: Current request (needed by the template engine).
        outcome: Result returned by MovieService.

    Returns:
        HTML response carrying the outcome's status code.

    Raises:
        TypeError: If no template is registered for the outcome type.
    """
    template = _TEMPLATE_BY_OUTCOME.get(type(outcome))
    if template is None:
        raise TypeError(f"No template registered for {type(outcome).__name__}")

    return templates.TemplateResponse(
        request,
        template,
        {"outcome": outcome, "app_title": settings.api.title},
        status_code=outcome.status_code,
    )
