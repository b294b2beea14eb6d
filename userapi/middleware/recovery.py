"""Recovery middleware: per-request fault boundary.

Any exception that escapes the routers and exception handlers is logged
with its traceback and answered with a generic 500 envelope, so one bad
request never takes the worker down or leaks internals to the client.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import json
import logging
from typing import Callable

from userapi.schemas.envelope import error_envelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


async def send_json_envelope(send: Callable, status: int, message: str) -> None:
    """Send a complete error-envelope response on a raw ASGI send channel."""
    body = json.dumps(error_envelope(message, status)).encode()
    await send({
        "type": "http.response.start",
        "status": status,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({
        "type": "http.response.body",
        "body": body,
        "more_body": False,
    })


def RecoveryMiddleware(app: Callable) -> Callable:
    """Convert unhandled exceptions into a 500 envelope. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception:
            logger.exception(
                "Panic recovered: %s %s",
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                # Headers are out; nothing valid can be sent any more.
                return
            await send_json_envelope(send, 500, INTERNAL_ERROR_MESSAGE)

    return asgi_app
