"""Application configuration helpers."""

from __future__ import annotations

from .env import env_value
from .errors import ConfigurationError
from .resolver import ResolverSettings, get_identifier_field, get_resolver_settings
from .storage import DatabaseConfig, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "ResolverSettings",
    "env_value",
    "get_database_config",
    "get_identifier_field",
    "get_resolver_settings",
]
