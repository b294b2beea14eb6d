"""Format checks for user input (name, email). Pure functions, no state."""

import re

# Basic local@domain.tld shape; no attempt at full RFC 5321 compliance.
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", re.ASCII)
NAME_PATTERN = re.compile(r"[a-zA-Z\s\-'.]+", re.ASCII)
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100

NAME_REQUIRED = "Name is required"
NAME_INVALID = (
    "Name must be 2-100 characters and contain only letters, spaces, "
    "hyphens, apostrophes, and periods"
)
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email format is invalid"
EMAIL_TOO_LONG = f"Email must be at most {EMAIL_MAX_LENGTH} characters"


def is_valid_email(email: str) -> bool:
    """Return True if email looks like local@domain.tld (TLD of 2+ letters)."""
    return bool(EMAIL_PATTERN.fullmatch(email))


def is_valid_name(name: str) -> bool:
    """Return True if name is 2-100 characters of letters, whitespace, ``-``, ``'`` or ``.``."""
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return False
    return bool(NAME_PATTERN.fullmatch(name))


def validate_user_input(name: str, email: str) -> list[str]:
    """Validate a name/email pair for create and update.

    Name and email are checked independently, so both errors are reported
    when both are invalid. Length limits match the VARCHAR(100) columns of
    the users table.

    Args:
        name: Candidate user name (already sanitized).
        email: Candidate email address (already sanitized).

    Returns:
        Ordered list of human-readable errors; empty when the input is valid.
    """
    errors: list[str] = []

    if not name:
        errors.append(NAME_REQUIRED)
    elif not is_valid_name(name):
        errors.append(NAME_INVALID)

    if not email:
        errors.append(EMAIL_REQUIRED)
    elif len(email) > EMAIL_MAX_LENGTH:
        errors.append(EMAIL_TOO_LONG)
    elif not is_valid_email(email):
        errors.append(EMAIL_INVALID)

    return errors
