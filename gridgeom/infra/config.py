"""Logging configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("GRIDGEOM_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default


def _format(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in _FORMATS else default


def load_logging_config() -> LoggingConfig:
    """Load immutable logging configuration from env vars."""
    file_path = os.getenv("GRIDGEOM_LOG_FILE", "").strip() or None
    return LoggingConfig(
        level_name=resolve_log_level_name(default="INFO"),
        console_format=_format("GRIDGEOM_LOG_FORMAT", "text"),
        file_path=file_path,
        file_format=_format("GRIDGEOM_LOG_FILE_FORMAT", "json"),
    )
