"""Ports describing the queryable collections rules operate on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class Dispatchable(Protocol):
    """Something exposing named operations (scopes) that can be probed and invoked."""

    def responds_to(self, name: str) -> bool: ...

    def invoke(self, name: str, *args: object) -> object: ...


@runtime_checkable
class Filterable(Protocol):
    """Something that can be narrowed by attribute equality."""

    def has_attribute(self, name: str) -> bool: ...

    def filter_by_equality(self, attribute: str, value: object) -> object: ...


@runtime_checkable
class Materializable(Protocol):
    def materialize_all(self) -> Sequence[object]: ...

    def first(self) -> object | None: ...


@runtime_checkable
class ResourceSet(Dispatchable, Filterable, Materializable, Protocol):
    """A chainable collection supporting scopes, equality filters and materialisation."""


@runtime_checkable
class ResourceSetSource(Protocol):
    """Factory producing the initial resource set for a call."""

    def all_of(self, model: type) -> ResourceSet: ...

    def related(self, parent: object, accessor: str) -> ResourceSet: ...
