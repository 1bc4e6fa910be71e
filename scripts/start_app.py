#!/usr/bin/env python3
"""Start the discussion API, reporting startup errors to Logfire."""

import sys
import logfire
import uvicorn

from deck.config import Settings
from deck.util.logging import setup_logging
from deck.util.observability import configure_logfire


def main() -> int:
    """Configure logging and telemetry, then serve the app with uvicorn."""
    settings = Settings()

    # Both must happen before the app module is imported by uvicorn
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting discussion API",
            environment=settings.environment,
            port=settings.port,
        )

        uvicorn.run(
            "deck.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Discussion API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
