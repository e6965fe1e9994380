#!/usr/bin/env python3
"""Run the Pawprint API under uvicorn.

Logging and Logfire are set up here, before uvicorn imports the app
module, so import-time failures are reported too.
"""

import sys

import logfire
import uvicorn

from pawprint.config import Settings
from pawprint.util.logging import setup_logging
from pawprint.util.observability import configure_logfire

APP = "pawprint.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Pawprint API",
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Pawprint API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
