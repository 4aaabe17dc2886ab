#!/usr/bin/env python3
"""Upgrade the database schema to the latest alembic revision.

Usage:
    DATABASE__URL=postgresql+asyncpg://... python scripts/run_migrations.py [revision]
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from flashcastr.config import Settings
from flashcastr.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    target = make_url(settings.database_url).render_as_string(hide_password=True)

    with logfire.span("run_migrations", revision=revision, database=target):
        config = Config("alembic.ini")
        # ConfigParser interpolation: escape percent-encoded credentials
        config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))
        try:
            command.upgrade(config, revision)
        except Exception as e:
            # A failed migration must fail the deploy
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

        logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
