"""Alembic environment.

Migrations run against one database at a time. The target is, in order:
the `database_type` attribute set by scripts/run_migrations.py, the
`-x database=...` command line option, then the configured default.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from bulletin.config import Settings
from bulletin.domain.value import DatabaseType
from bulletin.persistence.database import database_url
from bulletin.persistence.tables import metadata

config = context.config

if config.config_file_name is not None and "database_type" not in config.attributes:
    fileConfig(config.config_file_name)

target_metadata = metadata


def _target_url() -> str:
    settings = Settings()
    database_type = config.attributes.get("database_type")
    if database_type is None:
        requested = context.get_x_argument(as_dictionary=True).get("database")
        database_type = DatabaseType.parse(requested or settings.database.type)
    return database_url(settings, database_type)


def run_migrations_offline() -> None:
    """Emit SQL for the target database without connecting."""
    context.configure(
        url=_target_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    engine = create_async_engine(_target_url())

    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await engine.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
