"""Centralized structlog configuration.

Events are logged as snake_case names with key/value context:

    logger = get_logger(__name__)
    logger.info("movie_created", movie_id=3, title="Elf")
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

from mvcmovie.settings import LoggingSettings, settings

_LOGGING_CONFIGURED = False


def setup_logging(config: LoggingSettings | None = None, force: bool = False) -> None:
    """Configure structlog once for the whole process.

    Args:
        config: Logging settings (defaults to the global settings).
        force: Reconfigure even if logging was already set up.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603

    if _LOGGING_CONFIGURED and not force:
        return

    config = config or settings.logging
    level = logging.getLevelName(config.level)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if config.format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    _LOGGING_CONFIGURED = True

    logger = structlog.get_logger(__name__)
    logger.debug("logging_configured", level=config.level, format=config.format)


def get_logger(name: str) -> FilteringBoundLogger:
    """Return a named structlog logger.

    Args:
        name: Logger name, usually the module's ``__name__``.

    Returns:
        Lazily bound structlog logger.
    """
    return structlog.get_logger(name)
