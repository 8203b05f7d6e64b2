from __future__ import annotations

import logging

import pytest

from graphresolve.config import (
    ConfigurationError,
    DatabaseConfig,
    ResolverSettings,
    env_value,
    get_database_config,
    get_identifier_field,
    get_resolver_settings,
)


def test_env_value_strips_and_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value  ")
    monkeypatch.setenv("BLANK_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    assert env_value("EXAMPLE_VAR", "default") == "value"
    assert env_value("BLANK_VAR", "default") == "default"
    assert env_value("MISSING_VAR", "default") == "default"


def test_resolver_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRAPHRESOLVE_IDENTIFIER_FIELD", raising=False)
    monkeypatch.delenv("GRAPHRESOLVE_LOG_LEVEL", raising=False)

    assert get_resolver_settings() == ResolverSettings(identifier_field="id", log_level=logging.INFO)


def test_resolver_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPHRESOLVE_IDENTIFIER_FIELD", "uuid")
    monkeypatch.setenv("GRAPHRESOLVE_LOG_LEVEL", "debug")

    settings = get_resolver_settings()

    assert settings.identifier_field == "uuid"
    assert settings.log_level == logging.DEBUG


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPHRESOLVE_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError, match="chatty"):
        get_resolver_settings()


def test_database_config_defaults_to_in_memory_sqlite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.delenv("DATABASE_ECHO", raising=False)

    assert get_database_config() == DatabaseConfig(uri="sqlite+pysqlite:///:memory:")


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("off", False)])
def test_database_config_reads_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")
    monkeypatch.setenv("DATABASE_ECHO", raw)

    config = get_database_config()

    assert config.uri == "sqlite:///override.db"
    assert config.echo is expected


def test_identifier_field_ignores_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPHRESOLVE_IDENTIFIER_FIELD", "uuid")
    monkeypatch.setenv("GRAPHRESOLVE_LOG_LEVEL", "verbose")

    assert get_identifier_field() == "uuid"
