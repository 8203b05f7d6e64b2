"""Identifier-typed argument detection and global identifier decoding."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from graphresolve.domain.types import is_identifier_type

if TYPE_CHECKING:
    from graphresolve.domain.context import RequestContext
    from graphresolve.domain.ports import FieldIntrospection

log = logging.getLogger(__name__)


def has_identifier_argument(introspection: FieldIntrospection, field_name: str) -> bool:
    """Return True when ``field_name`` declares any ID-typed argument."""

    return any(
        is_identifier_type(type_descriptor)
        for type_descriptor in introspection.declared_arguments(field_name).values()
    )


def is_argument_identifier_type(
    introspection: FieldIntrospection,
    field_name: str,
    argument: str,
) -> bool:
    return is_identifier_type(introspection.declared_argument_type(field_name, argument))


def resolve_identifier(value: object, context: RequestContext) -> object | list[object]:
    """Decode one global identifier, or each identifier of a sequence.

    Undecodable members of a sequence are dropped; an undecodable scalar yields ``None``.
    """

    decoder = context.decoder
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        decoded = [decoder.decode(identifier, context) for identifier in value]
        resolved = [item for item in decoded if item is not None]
        if len(resolved) != len(decoded):
            log.debug("Dropped %d undecodable identifiers", len(decoded) - len(resolved))
        return resolved
    return decoder.decode(value, context)
