"""UTC helpers.

The users table keeps naive TIMESTAMP values stamped by the database clock
(session time zone pinned to UTC); repositories pass them through
ensure_utc so every datetime leaving the persistence layer is aware.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as an aware UTC datetime.

    Naive values are taken to be UTC already; aware values are converted.
    None passes through.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
