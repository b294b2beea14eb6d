"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). The only place where domain
exceptions become HTTP status codes; every response body uses the error
envelope from userapi.schemas.envelope. Unexpected exceptions are not
handled here; RecoveryMiddleware turns them into a 500 envelope.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.domain.exceptions import UserApiException
from userapi.schemas.envelope import error_envelope

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "DUPLICATE_EMAIL": 409,
    "INTERNAL_ERROR": 500,
}

# Client-facing messages for malformed path parameters, keyed by parameter name.
_PATH_PARAM_MESSAGES: dict[str, str] = {
    "user_id": "Invalid user ID",
}

INVALID_JSON_MESSAGE = "Invalid JSON payload"
MISSING_FIELDS_MESSAGE = "Name and email are required"


def _userapi_exception_handler(request: Request, exc: UserApiException) -> JSONResponse:
    """Return the error envelope for a domain exception with its mapped status."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        # Message is already generic; the cause was logged where it was raised.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.debug(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            exc.error_code,
            exc.details,
        )
    return JSONResponse(status_code=status, content=error_envelope(exc.message, status))


def _validation_message(errors: list[dict[str, Any]]) -> str:
    """Pick one client-facing message for a list of pydantic errors.

    Bad path parameter beats body problems; within the body, a missing field
    reads "required" and anything else (bad JSON, wrong types, no body) reads
    as an invalid payload.
    """
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if loc and loc[0] == "path":
            return _PATH_PARAM_MESSAGES.get(str(loc[-1]), f"Invalid {loc[-1]}")
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if err.get("type") != "missing" or loc == ("body",):
            return INVALID_JSON_MESSAGE
    return MISSING_FIELDS_MESSAGE


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 (not FastAPI's default 422) with a validation envelope."""
    message = _validation_message(list(exc.errors()))
    return JSONResponse(status_code=400, content=error_envelope(message, 400))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the envelope for Starlette HTTP exceptions (unknown route, wrong method)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail), exc.status_code),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: UserApiException (and
    subclasses), RequestValidationError, StarletteHTTPException.
    """
    app.add_exception_handler(UserApiException, _userapi_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
