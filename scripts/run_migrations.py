#!/usr/bin/env python3
"""Run database migrations against one or both databases.

Usage:
    python scripts/run_migrations.py            # default database
    python scripts/run_migrations.py oracle     # a specific database
    python scripts/run_migrations.py all        # MariaDB, then Oracle
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from bulletin.config import Settings
from bulletin.domain.value import DatabaseType
from bulletin.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()

    # Configure Logfire
    configure_logfire(settings)

    target = argv[0] if argv else settings.database.type
    if target.lower() == "all":
        targets = list(DatabaseType)
    else:
        targets = [DatabaseType.parse(target)]

    for database_type in targets:
        try:
            logfire.info("Starting database migrations", database=database_type.value)

            alembic_cfg = Config("alembic.ini")
            alembic_cfg.attributes["database_type"] = database_type

            command.upgrade(alembic_cfg, "head")

            logfire.info(
                "Database migrations completed successfully",
                database=database_type.value,
            )

        except Exception as e:
            logfire.error(
                "Database migration failed",
                database=database_type.value,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
