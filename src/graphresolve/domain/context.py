"""Request context handed to every resolver call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphresolve.domain.ports import FieldIntrospection, GlobalIdDecoder, ResourceSetSource


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestContext:
    """Collaborators available while resolving one field.

    ``state`` carries whatever the surrounding framework wants resolver methods to see
    (for strawberry, the ``Info`` object).
    """

    introspection: FieldIntrospection
    decoder: GlobalIdDecoder
    resource_sets: ResourceSetSource
    state: object = None
