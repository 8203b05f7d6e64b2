"""Domain port definitions for adapters."""

from __future__ import annotations

from .identifiers import GlobalIdDecoder
from .introspection import FieldIntrospection
from .resource_set import (
    Dispatchable,
    Filterable,
    Materializable,
    ResourceSet,
    ResourceSetSource,
)

__all__ = [
    "Dispatchable",
    "FieldIntrospection",
    "Filterable",
    "GlobalIdDecoder",
    "Materializable",
    "ResourceSet",
    "ResourceSetSource",
]
