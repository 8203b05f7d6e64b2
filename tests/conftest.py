from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from graphresolve.adapters.sqlalchemy import create_database_engine, create_session_factory
from graphresolve.config import DatabaseConfig
from tests.support.blog import mapper_registry, start_mappers

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_database_engine(DatabaseConfig(uri="sqlite+pysqlite:///:memory:"))
    start_mappers()
    mapper_registry.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session = create_session_factory(engine=sqlite_engine)()
    try:
        yield session
    finally:
        session.close()
