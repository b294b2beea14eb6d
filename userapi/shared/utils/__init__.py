"""Shared utilities: datetime, sanitization, validation."""

from userapi.shared.utils.datetime import ensure_utc, utc_now
from userapi.shared.utils.sanitization import sanitize_string
from userapi.shared.utils.validation import (
    is_valid_email,
    is_valid_name,
    validate_user_input,
)

__all__ = [
    "ensure_utc",
    "is_valid_email",
    "is_valid_name",
    "sanitize_string",
    "utc_now",
    "validate_user_input",
]
