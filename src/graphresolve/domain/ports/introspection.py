"""Ports for reading the declared shape of the field being resolved."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from graphresolve.domain.types import TypeDescriptor


@runtime_checkable
class FieldIntrospection(Protocol):
    """Read-only view on the schema definition of the currently executing field."""

    def current_field_name(self) -> str: ...

    def declared_arguments(self, field_name: str) -> Mapping[str, TypeDescriptor]: ...

    def declared_argument_type(self, field_name: str, argument: str) -> TypeDescriptor | None: ...

    def is_connection_field(self) -> bool: ...

    def is_list_field(self) -> bool: ...
