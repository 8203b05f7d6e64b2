"""Database configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_value

DEFAULT_DATABASE_URI: Final[str] = "sqlite+pysqlite:///:memory:"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str
    echo: bool = False


def get_database_config() -> DatabaseConfig:
    return DatabaseConfig(
        uri=env_value("DATABASE_URI", DEFAULT_DATABASE_URI),
        echo=env_value("DATABASE_ECHO", "0").lower() in {"1", "true", "yes"},
    )
