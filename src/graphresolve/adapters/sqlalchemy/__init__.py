"""SQLAlchemy adapter package for graphresolve."""

from __future__ import annotations

from .decoder import SqlAlchemyNodeDecoder
from .resource_set import Scope, SqlAlchemyResourceSet
from .scopes import ScopeRegistry
from .session import create_database_engine, create_session_factory
from .source import SqlAlchemyResourceSets

__all__ = [
    "Scope",
    "ScopeRegistry",
    "SqlAlchemyNodeDecoder",
    "SqlAlchemyResourceSet",
    "SqlAlchemyResourceSets",
    "create_database_engine",
    "create_session_factory",
]
