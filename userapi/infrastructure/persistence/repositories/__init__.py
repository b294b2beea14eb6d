"""SQLAlchemy repositories (implement application interfaces)."""

from userapi.infrastructure.persistence.repositories.base import BaseRepository
from userapi.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = ["BaseRepository", "UserRepository"]
