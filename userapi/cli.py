"""Command-line entry point: serve the user API with uvicorn."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import uvicorn

from userapi.core.config import Settings, get_settings
from userapi.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="User CRUD REST service")
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (default: SERVER_HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Listen port (default: SERVER_PORT or 8080)",
    )
    return parser.parse_args(list(argv) if argv is not None else sys.argv[1:])


def serve(settings: Settings, *, host: str | None = None, port: int | None = None) -> None:
    """Run uvicorn until SIGINT/SIGTERM.

    On a termination signal uvicorn stops accepting connections and waits
    up to server_shutdown_timeout seconds for in-flight requests before the
    lifespan disposes the pool.
    """
    from userapi.main import create_app

    bind_host = host or settings.server_host
    bind_port = port or settings.server_port
    logger.info("Server starting on %s:%s", bind_host, bind_port)

    app = create_app(settings)
    uvicorn.run(
        app,
        host=bind_host,
        port=bind_port,
        log_config=None,
        timeout_keep_alive=settings.server_read_timeout,
        timeout_graceful_shutdown=settings.server_shutdown_timeout,
    )
    logger.info("Server exited")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for CLI usage."""
    args = _parse_args(argv)
    settings = get_settings()
    setup_logging(settings)
    logger.info("Configuration loaded successfully")
    serve(settings, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
