"""Database dependency injection for FastAPI.

Provides async session factories for read and write operations with proper
transaction management and connection pooling.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_read_engine, create_write_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import DatabaseSettings, get_database_settings

# Module-level probe for observability
_probe = DefaultConnectionProbe()

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


class _EngineSlot:
    """Lazily created engine plus the sessionmaker bound to it."""

    def __init__(
        self, role: str, factory: Callable[[DatabaseSettings], AsyncEngine]
    ) -> None:
        self.role = role
        self._factory = factory
        self.engine: AsyncEngine | None = None
        self.sessionmaker: async_sessionmaker[AsyncSession] | None = None

    def ensure(self) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
        """Return the engine and its sessionmaker, creating both on first use."""
        engine, sessionmaker = self.engine, self.sessionmaker
        if engine is not None and sessionmaker is not None:
            return engine, sessionmaker

        # Double-check locking: only the first caller builds the engine
        with _engine_lock:
            engine, sessionmaker = self.engine, self.sessionmaker
            if engine is None or sessionmaker is None:
                settings = get_database_settings()
                engine = self._factory(settings)
                sessionmaker = async_sessionmaker(
                    engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
                self.engine, self.sessionmaker = engine, sessionmaker
                _probe.engine_created(
                    role=self.role,
                    connection=settings.connection_string,
                    pool_size=settings.pool_max_connections,
                )
        return engine, sessionmaker

    async def dispose(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        _probe.engine_disposed(role=self.role)
        self.engine = None
        self.sessionmaker = None


_write = _EngineSlot("write", create_write_engine)
_read = _EngineSlot("read", create_read_engine)


def get_write_engine() -> AsyncEngine:
    """Get the write database engine (singleton).

    Returns:
        Configured async engine for write operations
    """
    engine, _ = _write.ensure()
    return engine


def get_read_engine() -> AsyncEngine:
    """Get the read database engine (singleton).

    Returns:
        Configured async engine for read operations
    """
    engine, _ = _read.ensure()
    return engine


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a write session for commands (FastAPI dependency).

    The session is configured to NOT auto-commit. Application services
    own the transaction through `async with session.begin()`.

    Yields:
        AsyncSession for database operations
    """
    _, sessionmaker = _write.ensure()

    async with sessionmaker() as session:
        yield session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a read-only session for queries (FastAPI dependency).

    Not enforced at the database level; only read models should use it.

    Yields:
        AsyncSession for read-only database operations
    """
    _, sessionmaker = _read.ensure()

    async with sessionmaker() as session:
        yield session


async def close_database_connections() -> None:
    """Close all database engine connections.

    Should be called on application shutdown to properly cleanup connections.
    Also resets sessionmakers to allow reinitialization.
    """
    await _write.dispose()
    await _read.dispose()
