"""Pytest configuration and fixtures for userapi.

HTTP tests run against create_app() through httpx's ASGITransport, which
does not run the lifespan, so no database is needed: the user services are
swapped for ones backed by InMemoryUserRepository via dependency_overrides.
DB-dependent fixtures (db_session, database) skip when Postgres is not
reachable; mark such tests with @pytest.mark.requires_db.
"""

import itertools
from collections.abc import AsyncIterator
from datetime import timedelta

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.api.dependencies import get_user_service, get_user_service_for_write
from userapi.application.dtos.user import UserResult
from userapi.application.services.user_service import UserService
from userapi.core.config import Settings
from userapi.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
)
from userapi.infrastructure.persistence.database import Database
from userapi.main import create_app
from userapi.shared.utils.datetime import utc_now


class InMemoryUserRepository:
    """IUserRepository kept in a dict. Enforces unique email like the users table."""

    def __init__(self) -> None:
        self.rows: dict[int, UserResult] = {}
        self._ids = itertools.count(1)
        self._tick = 0

    def _now(self):
        # Strictly increasing clock so ordering by created_at is deterministic.
        self._tick += 1
        return utc_now() + timedelta(microseconds=self._tick)

    def _email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        return any(
            u.email == email and u.id != exclude_id for u in self.rows.values()
        )

    async def get_all(self) -> list[UserResult]:
        return sorted(self.rows.values(), key=lambda u: u.created_at, reverse=True)

    async def get_by_id(self, user_id: int) -> UserResult:
        try:
            return self.rows[user_id]
        except KeyError:
            raise ResourceNotFoundException("User", user_id) from None

    async def get_by_email(self, email: str) -> UserResult:
        for user in self.rows.values():
            if user.email == email:
                return user
        raise ResourceNotFoundException("User", email)

    async def create(self, name: str, email: str) -> UserResult:
        if self._email_taken(email):
            raise DuplicateEmailException()
        now = self._now()
        user = UserResult(
            id=next(self._ids), name=name, email=email, created_at=now, updated_at=now
        )
        self.rows[user.id] = user
        return user

    async def update(self, user_id: int, name: str, email: str) -> UserResult:
        current = await self.get_by_id(user_id)
        if self._email_taken(email, exclude_id=user_id):
            raise DuplicateEmailException()
        user = UserResult(
            id=current.id,
            name=name,
            email=email,
            created_at=current.created_at,
            updated_at=self._now(),
        )
        self.rows[user_id] = user
        return user

    async def delete(self, user_id: int) -> None:
        if self.rows.pop(user_id, None) is None:
            raise ResourceNotFoundException("User", user_id)


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the developer's .env."""
    return Settings(_env_file=None, log_format="text", server_write_timeout=30)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user_service(user_repo: InMemoryUserRepository) -> UserService:
    return UserService(user_repo)


@pytest.fixture
def app(settings: Settings, user_service: UserService) -> FastAPI:
    """Application with user services backed by the in-memory repository."""
    application = create_app(settings)
    application.dependency_overrides[get_user_service] = lambda: user_service
    application.dependency_overrides[get_user_service_for_write] = lambda: user_service
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    """Database built from DB_* env vars with the schema in place.

    Skips (pytest.skip) when Postgres is not reachable.
    """
    db = Database(Settings())
    try:
        await db.ping()
        await db.create_schema()
    except Exception as exc:
        await db.dispose()
        pytest.skip(f"Postgres not reachable (set DB_HOST, DB_USER, ...): {exc}")
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Rolls back after test."""
    async with database.session_factory() as session:
        yield session
        await session.rollback()
