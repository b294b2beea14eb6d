"""Application ports: protocols implemented by infrastructure."""

from userapi.application.interfaces.repositories import IUserRepository

__all__ = ["IUserRepository"]
