# This file defines runtime settings for the task API in one place.
# It exists so the listen address, database URL, and table name can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# It also validates the table name to prevent unsafe SQL identifier usage.

from __future__ import annotations

import os
import re

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

DEFAULT_HTTP_PORT = 8080


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Task Tracker API"
    host: str = "0.0.0.0"
    port: int = DEFAULT_HTTP_PORT
    environment: str = "local"
    log_level: str = "INFO"
    database_url: str
    db_pool_size: int = 5
    tasks_table_name: str = "tasks"
    auto_create_schema: bool = False
    allowed_origins: list[str] = Field(default_factory=list)
    app_version: str = "0.1.0"

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("database_url must not be empty.")
        return value

    @field_validator("tasks_table_name")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Unsafe SQL identifier: {value!r}")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535.")
        return value

    @field_validator("db_pool_size")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_port(default: int) -> int:
    # HTTP_PORT may be given as ":8080" or "8080"; API_PORT is the fallback name.
    raw = os.getenv("HTTP_PORT") or os.getenv("API_PORT")
    if raw is None or raw.strip() == "":
        return default
    return int(raw.strip().lstrip(":"))


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    database_url = os.getenv("DATABASE_URL", "")
    if not database_url:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Task Tracker API"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_port(DEFAULT_HTTP_PORT),
        "environment": os.getenv("ENV", "local"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "database_url": database_url,
        "db_pool_size": _env_int("API_DB_POOL_SIZE", 5),
        "tasks_table_name": os.getenv("API_TASKS_TABLE_NAME", "tasks"),
        "auto_create_schema": _env_bool("API_AUTO_CREATE_SCHEMA", False),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }

    return ApiConfig.model_validate(config_values)
