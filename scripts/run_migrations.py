#!/usr/bin/env python3
"""Upgrade the schema to the newest alembic revision.

Runs as a deploy step before the API starts; a failure exits non-zero so
the deploy stops.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from pawprint.config import Settings
from pawprint.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception:
            logfire.exception("Migration failed", revision=revision)
            raise
    logfire.info("Schema is up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
