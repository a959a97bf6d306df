"""Database connection and session management.

Provides async database engines and session factories for MariaDB
(aiomysql) and Oracle (python-oracledb in async mode).
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bulletin.config import Settings
from bulletin.domain.value import DatabaseType


def database_url(settings: Settings, database_type: DatabaseType) -> str:
    """SQLAlchemy URL of the data source for a database type."""
    if database_type is DatabaseType.ORACLE:
        return settings.database.oracle_url
    return settings.database.mariadb_url


def create_engine(url: str, settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        url: SQLAlchemy database URL
        settings: Application settings with pool configuration

    Returns:
        Configured async engine
    """
    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )
