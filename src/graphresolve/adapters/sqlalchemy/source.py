"""Initial resource sets for resolver calls, built from a SQLAlchemy session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import select
from sqlalchemy.orm import with_parent

from graphresolve.adapters.sqlalchemy.resource_set import SqlAlchemyResourceSet
from graphresolve.adapters.sqlalchemy.scopes import ScopeRegistry
from graphresolve.domain.errors import InvalidConfiguration
from graphresolve.domain.ports import ResourceSet

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyResourceSets:
    def __init__(self, session: Session, scopes: ScopeRegistry | None = None) -> None:
        self.session = session
        self.scopes = scopes if scopes is not None else ScopeRegistry()

    def all_of(self, model: type) -> SqlAlchemyResourceSet[object]:
        return SqlAlchemyResourceSet(self.session, model, scopes=self.scopes.for_model(model))

    def related(self, parent: object, accessor: str) -> ResourceSet:
        """Rows reachable from ``parent`` through its ``accessor`` relationship."""

        parent_cls = type(parent)
        mapper = sa_inspect(parent_cls, raiseerr=False)
        if mapper is not None and accessor in mapper.relationships:
            target = mapper.relationships[accessor].mapper.class_
            statement = select(target).where(with_parent(parent, getattr(parent_cls, accessor)))
            return SqlAlchemyResourceSet(
                self.session,
                target,
                statement=statement,
                scopes=self.scopes.for_model(target),
            )

        value = getattr(parent, accessor, None)
        if isinstance(value, ResourceSet):
            return value
        raise InvalidConfiguration(
            f"{parent_cls.__name__}.{accessor} is neither a mapped relationship "
            "nor a resource set"
        )
