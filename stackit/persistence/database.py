"""Async PostgreSQL engine and sessions.

One engine per process (owned by the DI container), one session per
request. Repositories share the request session, so everything a request
writes commits or rolls back together.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stackit.config import Settings

APPLICATION_NAME = "stackit-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine from DATABASE__* settings."""
    return create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        # Shows up in pg_stat_activity next to the queries of this service
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
