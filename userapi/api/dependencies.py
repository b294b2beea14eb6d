"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and services.
The Database handle is created once by the lifespan and read from
app.state; routes depend only on these functions, never on infra directly.
Tests swap implementations with app.dependency_overrides.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.application.services.user_service import UserService
from userapi.domain.exceptions import StoreException
from userapi.infrastructure.persistence.database import Database
from userapi.infrastructure.persistence.repositories import UserRepository
from userapi.shared.telemetry.logging import get_logger

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    """Return the Database built at startup.

    Raises StoreException when the lifespan did not run (store not configured).
    """
    database = getattr(request.app.state, "database", None)
    if database is None:
        logger.error("Database not initialised: application lifespan has not run")
        raise StoreException("Service unavailable")
    return database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations. Does not commit."""
    async with database.session() as session:
        yield session


async def get_db_transactional(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, DELETE endpoints.
    """
    async with database.transaction() as session:
        yield session


def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserRepository:
    return UserRepository(db)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserService:
    """UserService for read endpoints."""
    return UserService(user_repo, get_logger("userapi.users"))


def get_user_service_for_write(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
) -> UserService:
    """UserService for write endpoints (same transaction for pre-check and write)."""
    return UserService(user_repo, get_logger("userapi.users"))
