"""Resource sets backed by SQLAlchemy ``Select`` statements."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sqlalchemy import false, func, or_, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import RelationshipProperty

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from sqlalchemy import ColumnElement, Select
    from sqlalchemy.orm import Session

# A scope narrows a statement: ``(statement, *args) -> statement``.
type Scope = Callable[..., Select[Any]]


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence | set | frozenset) and not isinstance(value, str | bytes)


def _identity_value(value: object) -> object:
    """Reduce a mapped instance to its primary key; leave anything else untouched."""

    state = sa_inspect(value, raiseerr=False)
    identity = getattr(state, "identity", None)
    if identity is None:
        return value
    return identity[0] if len(identity) == 1 else identity


class SqlAlchemyResourceSet[TModel]:
    """Immutable wrapper around a ``Select`` for ``TModel`` rows.

    Every narrowing operation returns a new resource set; nothing touches the database
    until ``materialize_all``, ``first``, ``count`` or iteration.
    """

    def __init__(
        self,
        session: Session,
        model: type[TModel],
        *,
        statement: Select[Any] | None = None,
        scopes: Mapping[str, Scope] | None = None,
    ) -> None:
        self.session = session
        self.model = model
        self.statement = statement if statement is not None else select(model)
        self._scopes: Mapping[str, Scope] = MappingProxyType(dict(scopes or {}))
        self._mapper = sa_inspect(model)

    def _derive(self, statement: Select[Any]) -> SqlAlchemyResourceSet[TModel]:
        return SqlAlchemyResourceSet(
            self.session,
            self.model,
            statement=statement,
            scopes=self._scopes,
        )

    # Dispatchable

    def responds_to(self, name: str) -> bool:
        return name in self._scopes

    def invoke(self, name: str, *args: object) -> SqlAlchemyResourceSet[TModel]:
        scope = self._scopes.get(name)
        if scope is None:
            raise AttributeError(f"{self.model.__name__} has no scope {name!r}")
        return self._derive(scope(self.statement, *args))

    # Filterable

    def has_attribute(self, name: str) -> bool:
        return name in self._mapper.attrs

    def filter_by_equality(self, attribute: str, value: object) -> SqlAlchemyResourceSet[TModel]:
        return self._derive(self.statement.where(self._equality(attribute, value)))

    def _equality(self, attribute: str, value: object) -> ColumnElement[bool]:
        prop = self._mapper.attrs[attribute]
        column = getattr(self.model, attribute)

        if isinstance(prop, RelationshipProperty):
            compare = column.contains if prop.uselist else column.__eq__
            if _is_sequence(value):
                items = list(value)  # type: ignore[call-overload]
                return or_(*(compare(item) for item in items)) if items else false()
            return compare(value)

        if _is_sequence(value):
            return column.in_([_identity_value(item) for item in value])  # type: ignore[union-attr]
        if value is None:
            return column.is_(None)
        return column == _identity_value(value)

    # Materializable

    def materialize_all(self) -> list[TModel]:
        return list(self.session.scalars(self.statement).all())

    def first(self) -> TModel | None:
        return self.session.scalars(self.statement.limit(1)).first()

    def count(self) -> int:
        total = self.session.scalar(select(func.count()).select_from(self.statement.subquery()))
        return int(total or 0)

    def __iter__(self) -> Iterator[TModel]:
        return iter(self.materialize_all())

    def __repr__(self) -> str:
        return f"SqlAlchemyResourceSet({self.model.__name__}, scopes={sorted(self._scopes)!r})"
