"""Domain layer: exceptions shared by every other layer.

No dependencies on infrastructure or presentation.
"""

from userapi.domain.exceptions import (
    ConflictException,
    DuplicateEmailException,
    ResourceNotFoundException,
    StoreException,
    UserApiException,
    ValidationException,
)

__all__ = [
    "ConflictException",
    "DuplicateEmailException",
    "ResourceNotFoundException",
    "StoreException",
    "UserApiException",
    "ValidationException",
]
