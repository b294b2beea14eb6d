"""Input sanitization helpers applied before validation."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_string(value: str) -> str:
    """Trim leading/trailing whitespace and collapse internal runs to one space.

    Args:
        value: Raw user-provided string.

    Returns:
        Normalized string ("  Ada   Lovelace " -> "Ada Lovelace").
    """
    if not value:
        return value
    return _WHITESPACE_RUN.sub(" ", value).strip()
