"""Engine and session factory construction from ``DatabaseConfig``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from graphresolve.config import DatabaseConfig, get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


def create_database_engine(config: DatabaseConfig | None = None) -> Engine:
    database = config or get_database_config()
    engine = create_engine(database.uri, echo=database.echo)
    log.info("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(
    config: DatabaseConfig | None = None,
    *,
    engine: Engine | None = None,
) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine`` or to one built from ``config``."""

    return sessionmaker(bind=engine or create_database_engine(config), expire_on_commit=False)
