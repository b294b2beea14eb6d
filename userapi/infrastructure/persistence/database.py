"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

A single Database instance is built at startup (see userapi.core.lifespan)
from Settings and stored on app.state; request dependencies borrow sessions
from it. There is no module-level engine.

Pool: fixed size (no overflow), connections recycled every
db_pool_recycle seconds and pinged before use.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from userapi.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


class Database:
    """Owns the AsyncEngine and hands out sessions.

    Engine creation does not open connections; call ping() (or
    create_schema()) at startup to fail fast when Postgres is unreachable.
    """

    def __init__(self, settings: Settings) -> None:
        connect_args: dict[str, Any] = {
            "command_timeout": settings.db_command_timeout,
            "ssl": settings.db_ssl,
            # TIMESTAMP columns are written by CURRENT_TIMESTAMP; pin the
            # session clock so naive values are UTC.
            "server_settings": {"timezone": "UTC"},
        }
        self.engine: AsyncEngine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_recycle=settings.db_pool_recycle,
            connect_args=connect_args,
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

    async def ping(self) -> None:
        """Run SELECT 1; raises the driver error when the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connected successfully")

    async def create_schema(self) -> None:
        """Create the users table and its updated_at trigger if absent."""
        from userapi.infrastructure.persistence.schema import create_schema

        async with self.engine.begin() as conn:
            await create_schema(conn)
        logger.info("Database tables created successfully")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session for reads. Does not commit."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Session inside a transaction: commits on success, rolls back on exception."""
        async with self.session_factory() as session:
            async with session.begin():
                yield session

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connections closed")
