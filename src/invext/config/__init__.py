"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag
from .errors import ConfigurationError
from .extensions import DEFAULT_EXTENSIONS_DIR, ExtensionsConfig, get_extensions_config
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_EXTENSIONS_DIR",
    "ConfigurationError",
    "DatabaseConfig",
    "ExtensionsConfig",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_extensions_config",
    "get_storage_config",
]
