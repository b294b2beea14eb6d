"""DTOs for user use cases (no dependency on ORM or HTTP)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """Persisted user as read from the store (result of get_by_id, create, etc.)."""

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CreateUserRequest:
    """Input for creating a user; validated before it reaches the repository."""

    name: str
    email: str


@dataclass(frozen=True)
class UpdateUserRequest:
    """Input for updating a user's name and email."""

    name: str
    email: str


@dataclass(frozen=True)
class UserResponse:
    """User as exposed to API clients. Field-for-field copy of UserResult."""

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


def to_response(user: UserResult) -> UserResponse:
    """Project a stored user onto the external response shape."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
