"""Async engine and session factory for the portal database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from campus.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine over ``settings.database_url`` (asyncpg driver).

    SQL is echoed when ``debug`` is on.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for one-session-per-request use.

    Rows are mapped to frozen models straight away, so nothing needs
    refreshing after commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
