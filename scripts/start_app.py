#!/usr/bin/env python3
"""Start the Duo API under uvicorn.

Logging and Logfire are configured before the app module is imported so that
import-time failures (bad settings, missing secrets) are reported.
"""

import sys

import logfire
import uvicorn

from duo.config import Settings
from duo.util.logging import setup_logging
from duo.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Duo API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "duo.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Duo API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
