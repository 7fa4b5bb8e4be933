"""Logging configuration for the application."""

import logging

import logfire

from campus.config import Settings


def setup_logging(settings: Settings) -> None:
    """Route standard library logging through Logfire.

    Application code logs with logfire directly; this catches uvicorn,
    SQLAlchemy and asyncpg records so they land in the same stream.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    # Engine echo already covers SQL in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
