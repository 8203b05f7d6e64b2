"""Resolver engine configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import env_value
from .errors import ConfigurationError

DEFAULT_IDENTIFIER_FIELD: Final[str] = "id"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


@dataclass(frozen=True, slots=True)
class ResolverSettings:
    """Process-wide defaults for resolver definitions."""

    identifier_field: str = DEFAULT_IDENTIFIER_FIELD
    log_level: int = logging.INFO


def _parse_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def get_identifier_field() -> str:
    """Read only the identifier argument name, leaving the log level unparsed."""

    return env_value("GRAPHRESOLVE_IDENTIFIER_FIELD", DEFAULT_IDENTIFIER_FIELD)


def get_resolver_settings() -> ResolverSettings:
    return ResolverSettings(
        identifier_field=get_identifier_field(),
        log_level=_parse_log_level(env_value("GRAPHRESOLVE_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
