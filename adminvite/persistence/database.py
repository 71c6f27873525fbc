"""Database engine and session factory for PostgreSQL (asyncpg).

The engine owns the connection pool and is process-wide: the DI container
creates it on first use, exactly once, and disposes it when the container
closes. Sessions are request-scoped and never shared between requests.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from adminvite.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine from ``settings.database``.

    SQL echo follows ``settings.debug``.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Objects stay usable after commit because repositories commit inside
    ``save`` and keep returning the saved entity.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
