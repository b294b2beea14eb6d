"""Request timeout middleware.

Cancels the request if it runs longer than the configured write timeout
(asyncio.wait_for) and answers 504 with the error envelope.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import asyncio
import logging
from typing import Callable

from userapi.middleware.recovery import send_json_envelope

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds (sends 504 on timeout). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or timeout_seconds <= 0:
            await app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                return
            await send_json_envelope(
                send, 504, f"Request timed out after {timeout_seconds} seconds"
            )

    return asgi_app
