"""Response envelope shared by every endpoint.

Success: {"success": true, "data": ...}
Failure: {"success": false, "error": {"error": <reason phrase>, "message": ..., "code": <status>}}
"""

from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessEnvelope(BaseModel, Generic[DataT]):
    """Successful response wrapper."""

    success: bool = True
    data: DataT


class APIError(BaseModel):
    """Error detail inside the failure envelope."""

    error: str = Field(..., description="HTTP reason phrase, e.g. 'Not Found'")
    message: str = Field(..., description="Client-safe description")
    code: int = Field(..., description="HTTP status code")


class ErrorEnvelope(BaseModel):
    """Failed response wrapper."""

    success: bool = False
    error: APIError


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for status_code ('' when unknown)."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def error_envelope(message: str, status_code: int) -> dict[str, Any]:
    """Build the failure envelope as a JSON-ready dict."""
    return ErrorEnvelope(
        error=APIError(
            error=status_text(status_code),
            message=message,
            code=status_code,
        )
    ).model_dump()
