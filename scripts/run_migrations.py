#!/usr/bin/env python3
"""Apply (or roll back) database migrations with Logfire error tracking."""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from adminvite.config import Settings
from adminvite.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    """Run migrations and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--downgrade",
        metavar="REVISION",
        help="Downgrade to REVISION instead of upgrading to head",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database.url)

    try:
        if args.downgrade:
            logfire.info("Starting database downgrade", revision=args.downgrade)
            command.downgrade(alembic_cfg, args.downgrade)
        else:
            logfire.info("Starting database migrations")
            command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
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
    sys.exit(main())
