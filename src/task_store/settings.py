from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_SESSION_TTL_HOURS = 24
DEFAULT_SCHEMA_OUTPUT_PATH = "./interfaces/task_schema.json"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - LOG_LEVEL: logging level name (default: INFO)
    - SESSION_TTL_HOURS: lifetime of a login session in hours (default: 24)
    - SCHEMA_OUTPUT_PATH: where generate_schema writes the JSON schema.
      Default './interfaces/task_schema.json'
    """

    log_level: int
    session_ttl_hours: int
    schema_output_path: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_level(value: str, default: int = logging.INFO) -> int:
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def _parse_positive_int(value: str, default: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        log_level=_parse_level(_get_env("LOG_LEVEL", "INFO")),
        session_ttl_hours=_parse_positive_int(
            _get_env("SESSION_TTL_HOURS", str(DEFAULT_SESSION_TTL_HOURS)), DEFAULT_SESSION_TTL_HOURS
        ),
        schema_output_path=_get_env("SCHEMA_OUTPUT_PATH", DEFAULT_SCHEMA_OUTPUT_PATH).strip(),
    )
