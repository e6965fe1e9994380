"""Stdlib logging setup.

Pawprint code logs through logfire. Libraries underneath (uvicorn,
SQLAlchemy, asyncpg) use the stdlib ``logging`` module; their records are
forwarded to logfire so both end up in the same place.
"""

import logging

import logfire

from pawprint.config import Settings

# Libraries that are noisy below WARNING; SQL echo is handled by the engine
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route stdlib log records to logfire.

    Args:
        settings: Application settings (``debug`` lowers the level to DEBUG)
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, handlers=[logfire.LogfireLoggingHandler()], force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Stdlib logging forwarded to logfire (level=%s)", logging.getLevelName(level)
    )
