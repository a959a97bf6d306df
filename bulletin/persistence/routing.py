"""Routing of sessions to the MariaDB or Oracle data source."""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bulletin.config import Settings
from bulletin.domain.value import DatabaseSelection, DatabaseType
from bulletin.persistence.database import (
    create_engine,
    create_session_factory,
    database_url,
)
from bulletin.util.observability import instrument_sqlalchemy


class DatabaseRouter:
    """Maps each database type to its engine and session factory.

    Engines are created on first use, so an unreachable Oracle server does
    not matter until a request actually selects it.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._engines: dict[DatabaseType, AsyncEngine] = {}
        self._session_factories: dict[
            DatabaseType, async_sessionmaker[AsyncSession]
        ] = {}

    def engine(self, database_type: DatabaseType) -> AsyncEngine:
        """Engine for a database type, created on first use."""
        if database_type not in self._engines:
            engine = create_engine(
                database_url(self.settings, database_type), self.settings
            )
            instrument_sqlalchemy(engine)
            logfire.info("Database engine created", database_type=database_type.value)
            self._engines[database_type] = engine
            self._session_factories[database_type] = create_session_factory(engine)
        return self._engines[database_type]

    def session_factory(
        self, selection: DatabaseSelection
    ) -> async_sessionmaker[AsyncSession]:
        """Session factory for the database a request selected."""
        self.engine(selection.database_type)
        return self._session_factories[selection.database_type]

    async def dispose(self) -> None:
        """Dispose every engine created so far."""
        for database_type, engine in self._engines.items():
            await engine.dispose()
            logfire.info("Database engine disposed", database_type=database_type.value)
        self._engines.clear()
        self._session_factories.clear()
