"""User application service: CRUD with the email-uniqueness rule."""

from __future__ import annotations

import logging

from userapi.application.dtos.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
    to_response,
)
from userapi.application.interfaces.repositories import IUserRepository
from userapi.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
)


class UserService:
    """Business rules above raw persistence.

    Email uniqueness is checked twice: an optimistic lookup here gives a
    fast Conflict, and the repository maps the store's unique constraint to
    the same Conflict when a concurrent request wins between lookup and write.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._logger = logger or logging.getLogger(__name__)

    async def get_all_users(self) -> list[UserResponse]:
        users = await self._user_repo.get_all()
        return [to_response(u) for u in users]

    async def get_user_by_id(self, user_id: int) -> UserResponse:
        """Raises ResourceNotFoundException if no user has this id."""
        user = await self._user_repo.get_by_id(user_id)
        return to_response(user)

    async def create_user(self, req: CreateUserRequest) -> UserResponse:
        """Create a user. Raises DuplicateEmailException if the email is taken."""
        if await self._email_owner(req.email) is not None:
            raise DuplicateEmailException()
        user = await self._user_repo.create(req.name, req.email)
        self._logger.info("Created user id=%s", user.id)
        return to_response(user)

    async def update_user(self, user_id: int, req: UpdateUserRequest) -> UserResponse:
        """Update name and email.

        Raises ResourceNotFoundException if the user does not exist and
        DuplicateEmailException if the email belongs to another user.
        Keeping one's own email is allowed.
        """
        await self._user_repo.get_by_id(user_id)
        owner = await self._email_owner(req.email)
        if owner is not None and owner != user_id:
            raise DuplicateEmailException()
        user = await self._user_repo.update(user_id, req.name, req.email)
        self._logger.info("Updated user id=%s", user.id)
        return to_response(user)

    async def delete_user(self, user_id: int) -> None:
        """Raises ResourceNotFoundException if no user has this id."""
        await self._user_repo.delete(user_id)
        self._logger.info("Deleted user id=%s", user_id)

    async def _email_owner(self, email: str) -> int | None:
        """Return the id of the user holding email, or None."""
        try:
            existing = await self._user_repo.get_by_email(email)
        except ResourceNotFoundException:
            return None
        return existing.id
