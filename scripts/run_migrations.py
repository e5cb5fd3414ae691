#!/usr/bin/env python3
"""Apply the normalized schema with Alembic, logging errors to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from udiddit.config import Settings
from udiddit.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting schema migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Schema migrations completed successfully")
        return 0
    except Exception as e:
        logfire.error(
            "Schema migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
