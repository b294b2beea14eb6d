"""Base repository: session handling and store-error classification."""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import Executable, Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.domain.exceptions import StoreException
from userapi.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation.
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the driver reported SQLSTATE 23505 (unique_violation)."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == UNIQUE_VIOLATION


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository bound to one AsyncSession and one model.

    Subclasses run statements through _execute so that any store failure
    other than an IntegrityError becomes a StoreException with a generic
    message. IntegrityError is re-raised untouched for the subclass to
    classify (unique violation -> Conflict).
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _execute(self, stmt: Executable, failure_message: str) -> Result[Any]:
        """Execute stmt; wrap non-integrity SQLAlchemy errors in StoreException."""
        try:
            return await self.db.execute(stmt)
        except IntegrityError:
            raise
        except SQLAlchemyError as exc:
            logger.error("%s: %s", failure_message, exc, exc_info=True)
            raise StoreException(failure_message) from exc
