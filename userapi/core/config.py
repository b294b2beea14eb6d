"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Every field is optional; the defaults describe a local
Postgres on the standard port.

Settings are built once at startup (create_app() or the CLI) and handed
to the components that need them; nothing below the composition root
calls get_settings() on its own.
"""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

_LOG_LEVELS = {"debug", "info", "warning", "warn", "error", "critical"}


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Field names map to environment variables case-insensitively
    (server_port <- SERVER_PORT, db_sslmode <- DB_SSLMODE, ...).
    """

    # App
    app_name: str = "userapi"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    server_read_timeout: int = 30
    server_write_timeout: int = 30
    server_shutdown_timeout: int = 30

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: SecretStr = SecretStr("pass")
    db_name: str = "postgres"
    db_sslmode: str = "disable"
    database_echo: bool = False
    db_pool_size: int = 25
    db_pool_recycle: int = 300
    db_command_timeout: int = 60

    # Logging
    log_level: str = "info"
    log_format: Literal["json", "text"] = "json"

    # CORS
    allowed_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, got: {value!r}"
            )
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, value: str) -> str:
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the asyncpg driver (password kept out of repr)."""
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password.get_secret_value(),
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def db_ssl(self) -> str | bool:
        """asyncpg ``ssl`` connect argument derived from DB_SSLMODE.

        asyncpg understands libpq mode names directly; "disable" turns TLS off.
        """
        mode = self.db_sslmode.strip().lower()
        if mode in ("", "disable"):
            return False
        return mode

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
