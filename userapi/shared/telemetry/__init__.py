"""Shared telemetry: logging setup."""

from userapi.shared.telemetry.logging import JsonFormatter, get_logger, setup_logging

__all__ = [
    "JsonFormatter",
    "get_logger",
    "setup_logging",
]
