"""Async engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pawprint.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the engine from ``settings.database``.

    SQL is echoed when ``settings.debug`` is on.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit and never autoflush.

    Repositories flush explicitly after writes that later reads depend on.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
