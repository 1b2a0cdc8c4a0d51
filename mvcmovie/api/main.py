"""FastAPI application entry point.

Creates and configures the MvcMovie web application with HTML movie
pages, a health check and Prometheus metrics.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from mvcmovie.api.routers import health, movies, reviews
from mvcmovie.database.connection import close_database, get_database
from mvcmovie.monitoring.middleware import PrometheusMiddleware, mount_metrics
from mvcmovie.settings import get_masked_settings, settings
from mvcmovie.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Creates missing tables on startup and releases the connection
    pool on shutdown. Honors a ``get_database`` dependency override.

    Args:
        app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    provider = app.dependency_overrides.get(get_database, get_database)
    db = provider()
    logger.debug("settings_loaded", settings=get_masked_settings())
    db.create_schema()
    logger.info("application_started", environment=settings.environment, database=db.url)
    yield
    if provider is get_database:
        close_database()
    else:
        db.dispose()
    logger.info("application_stopped")


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    setup_logging()
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Movie catalog with reviews",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)
    _register_routers(app)
    return app


def _register_routers(app: FastAPI) -> None:
    """Register routers and the root redirect.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(movies.router)
    app.include_router(reviews.router)
    app.include_router(health.router)

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url="/movies")


app = create_app()


# =============================================================================
# CLI ENTRY POINT
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mvcmovie.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
