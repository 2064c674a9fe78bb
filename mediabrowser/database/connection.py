"""
Database connection and session management.

Async engine and session factory used by the playlist and history managers.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from mediabrowser.config import DatabaseConfig, get_config
from mediabrowser.database.models.base import Base

logger = logging.getLogger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _get_async_url(url: str) -> str:
    """Use the aiosqlite driver for plain sqlite:/// URLs."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return url


def _get_pool_class(url: str):
    """Get appropriate pool class for database type."""
    if "sqlite" in url and ":memory:" in url:
        # A single shared connection keeps the in-memory database alive
        return StaticPool
    if "sqlite" in url:
        return NullPool
    return None


def create_engine_for_url(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for a (sync or async) database URL.

    Args:
        url: Database URL, e.g. sqlite:///./mediabrowser.db
        echo: Log all SQL statements
    """
    async_url = _get_async_url(url)
    engine_kwargs = {}
    pool_class = _get_pool_class(async_url)
    if pool_class is not None:
        engine_kwargs["poolclass"] = pool_class

    engine = create_async_engine(async_url, echo=echo, **engine_kwargs)

    if "sqlite" in async_url:
        @event.listens_for(engine.sync_engine, "connect")
        def on_connect(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db(db_config: Optional[DatabaseConfig] = None) -> async_sessionmaker[AsyncSession]:
    """
    Initialize the configured database and create tables.

    Args:
        db_config: Database settings, defaults to the global configuration

    Returns:
        The global session factory
    """
    global _async_engine, _async_session_factory

    if _async_session_factory is not None:
        return _async_session_factory

    db_config = db_config or get_config().database
    _async_engine = create_engine_for_url(db_config.url, echo=db_config.echo)
    await create_tables(_async_engine)
    _async_session_factory = create_session_factory(_async_engine)

    logger.info(f"Database initialized: {_async_engine.url.render_as_string(hide_password=True)}")
    return _async_session_factory


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session."""
    session_factory = await init_db()

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def close_db() -> None:
    """Close database connections and cleanup."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        await _async_engine.dispose()
        _async_engine = None
        _async_session_factory = None
