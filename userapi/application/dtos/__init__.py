"""Application DTOs: plain dataclasses passed between repository, service and API."""

from userapi.application.dtos.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
    UserResult,
    to_response,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "UserResult",
    "to_response",
]
