"""User repository: SQL for the users table. Interface methods return application DTOs."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.application.dtos.user import UserResult
from userapi.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    StoreException,
)
from userapi.infrastructure.persistence.models.user import User
from userapi.infrastructure.persistence.repositories.base import (
    BaseRepository,
    is_unique_violation,
)
from userapi.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)

_COLUMNS = (User.id, User.name, User.email, User.created_at, User.updated_at)

# users.id is a 32-bit SERIAL; asyncpg refuses to bind anything wider.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def _require_storable_id(user_id: int) -> None:
    """Raise ResourceNotFoundException for ids no row can have."""
    if not ID_MIN <= user_id <= ID_MAX:
        raise ResourceNotFoundException("User", user_id)


def _row_to_result(row: Any) -> UserResult:
    """Map a (id, name, email, created_at, updated_at) row to UserResult."""
    return UserResult(
        id=row.id,
        name=row.name,
        email=row.email,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
    )


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository over one AsyncSession.

    Statements are column-level (Core-style) so results never go through the
    identity map; every call sees what the database returned.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_all(self) -> list[UserResult]:
        result = await self._execute(
            select(*_COLUMNS).order_by(User.created_at.desc()),
            "Failed to retrieve users",
        )
        return [_row_to_result(row) for row in result.all()]

    async def get_by_id(self, user_id: int) -> UserResult:
        _require_storable_id(user_id)
        result = await self._execute(
            select(*_COLUMNS).where(User.id == user_id),
            "Failed to get user",
        )
        row = result.one_or_none()
        if row is None:
            raise ResourceNotFoundException("User", user_id)
        return _row_to_result(row)

    async def get_by_email(self, email: str) -> UserResult:
        result = await self._execute(
            select(*_COLUMNS).where(User.email == email),
            "Failed to get user by email",
        )
        row = result.one_or_none()
        if row is None:
            raise ResourceNotFoundException("User", email)
        return _row_to_result(row)

    async def create(self, name: str, email: str) -> UserResult:
        """Insert; raise DuplicateEmailException on unique constraint violation."""
        stmt = insert(User).values(name=name, email=email).returning(*_COLUMNS)
        try:
            result = await self._execute(stmt, "Failed to create user")
        except IntegrityError as exc:
            raise self._classify_integrity_error(exc, "Failed to create user") from exc
        return _row_to_result(result.one())

    async def update(self, user_id: int, name: str, email: str) -> UserResult:
        """Update name/email; the trigger refreshes updated_at before RETURNING."""
        _require_storable_id(user_id)
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(name=name, email=email)
            .returning(*_COLUMNS)
        )
        try:
            result = await self._execute(stmt, "Failed to update user")
        except IntegrityError as exc:
            raise self._classify_integrity_error(exc, "Failed to update user") from exc
        row = result.one_or_none()
        if row is None:
            raise ResourceNotFoundException("User", user_id)
        return _row_to_result(row)

    async def delete(self, user_id: int) -> None:
        _require_storable_id(user_id)
        result = await self._execute(
            delete(User).where(User.id == user_id),
            "Failed to delete user",
        )
        if result.rowcount == 0:
            raise ResourceNotFoundException("User", user_id)

    @staticmethod
    def _classify_integrity_error(
        exc: IntegrityError, failure_message: str
    ) -> DuplicateEmailException | StoreException:
        """Unique violation on email -> Conflict; any other constraint -> StoreException."""
        if is_unique_violation(exc):
            return DuplicateEmailException()
        logger.error("%s: %s", failure_message, exc, exc_info=True)
        return StoreException(failure_message)
