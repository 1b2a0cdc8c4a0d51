"""Health check endpoint."""

from fastapi import APIRouter

from mvcmovie.api.dependencies import DatabaseDep
from mvcmovie.api.schemas import DatabaseComponentHealth, HealthResponse
from mvcmovie.settings import settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Verify the application is running and the database is reachable.",
)
def health_check(db: DatabaseDep) -> HealthResponse:
    """Health check endpoint.

    Returns:
        Application status with database connectivity. Status is
        ``degraded`` when the database cannot be reached.
    """
    connected = db.check_connection()
    return HealthResponse(
        status="healthy" if connected else "degraded",
        version=settings.api.version,
        database=DatabaseComponentHealth(connected=connected, url=db.url),
    )
