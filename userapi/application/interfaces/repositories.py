"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from userapi.application.dtos.user import UserResult


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user storage (DIP).

    Lookups raise ResourceNotFoundException instead of returning None;
    writes raise DuplicateEmailException on a unique-email violation and
    StoreException on any other store failure.
    """

    async def get_all(self) -> list[UserResult]:
        """Return all users, most recently created first. Empty list when none."""

    async def get_by_id(self, user_id: int) -> UserResult:
        """Return user by id."""

    async def get_by_email(self, email: str) -> UserResult:
        """Return user by email (uniqueness checks; not an API lookup)."""

    async def create(self, name: str, email: str) -> UserResult:
        """Insert a user; the store assigns id, created_at and updated_at."""

    async def update(self, user_id: int, name: str, email: str) -> UserResult:
        """Replace name and email; the store refreshes updated_at."""

    async def delete(self, user_id: int) -> None:
        """Remove the user row."""
