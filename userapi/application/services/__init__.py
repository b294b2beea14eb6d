"""Application services."""

from userapi.application.services.user_service import UserService

__all__ = ["UserService"]
