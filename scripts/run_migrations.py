#!/usr/bin/env python3
"""Apply Alembic migrations to the discussion database."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from deck.config import Settings
from deck.util.logging import setup_logging
from deck.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to the given revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve on a broken schema
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
