"""Pydantic request/response schemas for the API."""

from userapi.schemas.envelope import (
    APIError,
    ErrorEnvelope,
    SuccessEnvelope,
    error_envelope,
)
from userapi.schemas.health import HealthResponse
from userapi.schemas.user import UserCreateBody, UserData, UserUpdateBody

__all__ = [
    "APIError",
    "ErrorEnvelope",
    "HealthResponse",
    "SuccessEnvelope",
    "UserCreateBody",
    "UserData",
    "UserUpdateBody",
    "error_envelope",
]
