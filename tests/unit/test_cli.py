"""CLI argument parsing and uvicorn wiring (uvicorn.run patched)."""

from unittest.mock import patch

from userapi import cli
from userapi.core.config import Settings


def test_parse_args_defaults_and_overrides() -> None:
    args = cli._parse_args([])
    assert args.host is None
    assert args.port is None
    args = cli._parse_args(["--host", "127.0.0.1", "--port", "9000"])
    assert args.host == "127.0.0.1"
    assert args.port == 9000


def test_serve_passes_timeouts_to_uvicorn() -> None:
    settings = Settings(
        _env_file=None, server_read_timeout=11, server_shutdown_timeout=7
    )
    with patch.object(cli.uvicorn, "run") as run:
        cli.serve(settings, port=9001)
    _, kwargs = run.call_args
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9001
    assert kwargs["timeout_keep_alive"] == 11
    assert kwargs["timeout_graceful_shutdown"] == 7
    assert kwargs["log_config"] is None


def test_module_logger_named_after_module() -> None:
    assert cli.logger.name == "userapi.cli"
