"""Framework-neutral descriptions of declared GraphQL argument and field types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

ID_TYPE_NAME: Final[str] = "ID"


class TypeKind(StrEnum):
    NAMED = "named"
    LIST = "list"
    NON_NULL = "non_null"


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """A named type, or a LIST / NON_NULL wrapper around another descriptor."""

    kind: TypeKind
    name: str | None = None
    of_type: TypeDescriptor | None = None

    def __post_init__(self) -> None:
        if self.kind is TypeKind.NAMED:
            if not self.name:
                raise ValueError("named type descriptors require a name")
        elif self.of_type is None:
            raise ValueError(f"{self.kind} type descriptors require of_type")

    @classmethod
    def named(cls, name: str) -> TypeDescriptor:
        return cls(kind=TypeKind.NAMED, name=name)

    @classmethod
    def list_of(cls, of_type: TypeDescriptor) -> TypeDescriptor:
        return cls(kind=TypeKind.LIST, of_type=of_type)

    @classmethod
    def non_null(cls, of_type: TypeDescriptor) -> TypeDescriptor:
        return cls(kind=TypeKind.NON_NULL, of_type=of_type)

    @property
    def named_type(self) -> TypeDescriptor:
        """Innermost named descriptor, with every wrapper removed."""

        current = self
        while current.of_type is not None:
            current = current.of_type
        return current

    @property
    def nullable(self) -> TypeDescriptor:
        if self.kind is TypeKind.NON_NULL and self.of_type is not None:
            return self.of_type
        return self

    @property
    def is_list(self) -> bool:
        return self.nullable.kind is TypeKind.LIST

    def __str__(self) -> str:
        if self.kind is TypeKind.LIST:
            return f"[{self.of_type}]"
        if self.kind is TypeKind.NON_NULL:
            return f"{self.of_type}!"
        return self.name or ""


ID = TypeDescriptor.named(ID_TYPE_NAME)


def is_identifier_type(type_descriptor: TypeDescriptor | None) -> bool:
    """Return True for ``ID`` wrapped in any combination of LIST and NON_NULL.

    ``ID``, ``[ID]``, ``ID!``, ``[ID!]`` and ``[ID!]!`` all qualify.
    """

    if type_descriptor is None:
        return False
    return type_descriptor.named_type.name == ID_TYPE_NAME
