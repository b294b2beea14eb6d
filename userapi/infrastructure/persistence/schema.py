"""Idempotent schema bootstrap for the users table.

Runs at startup: CREATE TABLE IF NOT EXISTS (via metadata.create_all with
checkfirst) plus a BEFORE UPDATE trigger that keeps updated_at current on
every row mutation. Safe to run on every boot.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from userapi.infrastructure.persistence import models  # noqa: F401  (registers tables)
from userapi.infrastructure.persistence.database import Base


def _trigger_function_updated_at() -> str:
    """Return SQL for trigger function that stamps updated_at."""
    return """
    CREATE OR REPLACE FUNCTION update_updated_at_column()
    RETURNS TRIGGER
    LANGUAGE plpgsql
    AS $$
    BEGIN
        NEW.updated_at = CURRENT_TIMESTAMP;
        RETURN NEW;
    END;
    $$
    """


# asyncpg runs one statement per execute, so each DDL statement is separate.
_TRIGGER_STATEMENTS = (
    _trigger_function_updated_at(),
    "DROP TRIGGER IF EXISTS update_users_updated_at ON users",
    "CREATE TRIGGER update_users_updated_at "
    "BEFORE UPDATE ON users "
    "FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()",
)


async def create_schema(conn: AsyncConnection) -> None:
    """Create tables and the updated_at trigger on an open connection."""
    await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    for statement in _TRIGGER_STATEMENTS:
        await conn.execute(text(statement))
