#!/usr/bin/env python3
"""Migrate bad_posts/bad_comments into the normalized schema.

Usage:
    python scripts/migrate_legacy.py [--dry-run]

Exit code 0 when the migration committed (or a dry run completed), 1 on a
fatal error. Nothing is written on failure.
"""

import argparse
import asyncio
import sys

import logfire
from sqlalchemy.exc import SQLAlchemyError

from udiddit.application.usecase.migration import (
    MigrationReport,
    RunMigrationRequest,
    RunMigrationUseCase,
)
from udiddit.config import Settings
from udiddit.domain.error import DomainError
from udiddit.util.di.container import create_container
from udiddit.util.error import ConfigurationError
from udiddit.util.logging import get_logger, setup_logging
from udiddit.util.observability import configure_logfire

logger = get_logger(__name__)


def print_report(report: MigrationReport) -> None:
    """Print a human-readable migration report."""
    status = "committed" if report.committed else "rolled back (dry run)"
    print(f"Migration {status}")
    print(f"  users:    {report.users}")
    print(f"  topics:   {report.topics}")
    print(f"  posts:    {report.posts}")
    print(f"  comments: {report.comments}")
    print(f"  votes:    {report.votes}")
    print(f"  rejected: {len(report.rejections)}")
    for rejection in report.rejections:
        print(
            f"    [{rejection.kind.value}] {rejection.key}: {rejection.reason}"
        )


async def run(dry_run: bool) -> int:
    """Run the migration in a single request scope."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(RunMigrationUseCase)
            report = await use_case.execute(RunMigrationRequest(dry_run=dry_run))
    except (DomainError, ConfigurationError, SQLAlchemyError) as e:
        logger.error(f"Migration failed: {e}")
        logfire.error(
            "Migration failed", error=str(e), error_type=type(e).__name__
        )
        return 1
    except Exception as e:
        logger.exception(f"Migration crashed: {e}")
        logfire.error(
            "Migration crashed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1
    finally:
        await container.close()

    print_report(report)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="run the full migration, then roll it back",
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    return asyncio.run(run(args.dry_run))


if __name__ == "__main__":
    sys.exit(main())
