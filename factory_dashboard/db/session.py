from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import Settings, get_settings


# PUBLIC_INTERFACE
def create_engine_from_settings(settings: Optional[Settings] = None) -> AsyncEngine:
    """Build an AsyncEngine for the configured database URL."""
    settings = settings or get_settings()
    return create_async_engine(
        settings.async_database_url,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,
    )


# PUBLIC_INTERFACE
def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Return a session factory bound to the engine.

    Sessions keep loaded attributes after commit so rows can be converted to read
    models once the transaction is closed.
    """
    return async_sessionmaker(
        bind=engine, expire_on_commit=False, autoflush=False, autocommit=False
    )
