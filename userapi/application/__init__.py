"""Application layer: interfaces, DTOs, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (user repository).
"""

from userapi.application.interfaces import IUserRepository
from userapi.application.services.user_service import UserService

__all__ = [
    "IUserRepository",
    "UserService",
]
