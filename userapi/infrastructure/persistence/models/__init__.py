"""SQLAlchemy ORM models."""

from userapi.infrastructure.persistence.models.user import User

__all__ = ["User"]
