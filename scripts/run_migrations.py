#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py                      # upgrade to head
    python scripts/run_migrations.py downgrade <revision>
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from campus.config import Settings
from campus.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    if len(argv) > 2 and argv[1] == "downgrade":
        direction, revision = "downgrade", argv[2]
    else:
        direction, revision = "upgrade", "head"

    try:
        logfire.info(
            "Starting database migrations", direction=direction, revision=revision
        )

        alembic_cfg = Config(str(ALEMBIC_INI))
        alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

        if direction == "downgrade":
            command.downgrade(alembic_cfg, revision)
        else:
            command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed successfully", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
