"""Access log middleware.

Logs one line per HTTP request (method, path, status, duration) and tags
it with a request ID, forwarded from X-Request-ID when the client sent a
safe value or generated otherwise. The ID is echoed on the response.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import logging
import re
import time
import uuid
from typing import Callable

logger = logging.getLogger(__name__)

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _request_id(raw: str | None) -> str:
    """Return raw if it is a safe request ID; otherwise a new UUID (prevents log injection)."""
    if raw and REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return raw.strip()
    return str(uuid.uuid4())


def AccessLogMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Log method, path, status and duration for every request. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = _request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        status_code = 500
        started = time.perf_counter()

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((header_name.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %s %.2fms",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                duration_ms,
                extra={"request_id": request_id},
            )

    return asgi_app
