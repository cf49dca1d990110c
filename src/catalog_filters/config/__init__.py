"""Application configuration helpers."""

from __future__ import annotations

from .catalog import CatalogConfig, get_catalog_config
from .env import optional_env_var
from .errors import ConfigurationError
from .logging import LOG_LEVEL_NAMES, configure_logging, resolve_log_level

__all__ = [
    "LOG_LEVEL_NAMES",
    "CatalogConfig",
    "ConfigurationError",
    "configure_logging",
    "get_catalog_config",
    "optional_env_var",
    "resolve_log_level",
]
