"""Tracing and structured logs via Logfire.

Services and repositories call logfire directly:

    with logfire.span("feed_service.query_feed", page=page, sort_by=sort):
        logfire.info("Feed page built", count=len(items))

This module only holds the process-wide setup done once at startup.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from pawprint.config import Settings


def _should_send(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Console output is always on (verbose in debug mode). Export to
    Logfire cloud is decided by ``_should_send``.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="pawprint-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per HTTP request. Headers are left out (X-User-Id)."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span per SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
