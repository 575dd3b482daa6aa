"""Application configuration helpers."""

from __future__ import annotations

from .discovery import (
    DISCOVERY_TAG,
    GENERIC_USERNAME,
    PREFERRED_KEY_TYPE,
    DiscoveryConfig,
    current_username,
    get_discovery_config,
)
from .errors import ConfigurationError
from .logging import configure_logging, log_level_from_env
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DISCOVERY_TAG",
    "GENERIC_USERNAME",
    "PREFERRED_KEY_TYPE",
    "ConfigurationError",
    "DatabaseConfig",
    "DiscoveryConfig",
    "StorageConfig",
    "configure_logging",
    "current_username",
    "get_database_config",
    "get_discovery_config",
    "get_storage_config",
    "log_level_from_env",
]
