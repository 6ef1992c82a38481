"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV_VAR, configure_logging, resolve_log_level
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_database_uri,
    get_storage_config,
)

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "ConfigurationError",
    "DatabaseConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_database_uri",
    "get_storage_config",
    "resolve_log_level",
]
