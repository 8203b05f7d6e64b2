"""Registry of named scopes per mapped model."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from graphresolve.adapters.sqlalchemy.resource_set import Scope


class ScopeRegistry:
    """Collects scopes such as ``only_active`` for each model.

    Usage::

        scopes = ScopeRegistry()

        @scopes.scope(Post)
        def published(statement):
            return statement.where(post_table.c.status == "published")
    """

    def __init__(self) -> None:
        self._scopes: dict[type, dict[str, Scope]] = {}

    def add(self, model: type, name: str, scope: Scope) -> None:
        self._scopes.setdefault(model, {})[name] = scope

    def scope(self, model: type, name: str | None = None) -> Callable[[Scope], Scope]:
        def decorator(scope: Scope) -> Scope:
            self.add(model, name or scope.__name__, scope)
            return scope

        return decorator

    def for_model(self, model: type) -> Mapping[str, Scope]:
        return MappingProxyType(self._scopes.get(model, {}))

    def __contains__(self, model: object) -> bool:
        return model in self._scopes
