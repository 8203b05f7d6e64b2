"""Ports for decoding opaque global identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from graphresolve.domain.context import RequestContext


@runtime_checkable
class GlobalIdDecoder(Protocol):
    """Turn an opaque identifier into the object it names, or ``None``."""

    def decode(self, opaque_id: object, context: RequestContext) -> object | None: ...
