"""Glue for calling resolvers from strawberry-graphql fields.

Typical field::

    @strawberry.field
    def posts(self, info: strawberry.Info, status: str | None = strawberry.UNSET) -> list[PostType]:
        context = request_context(info, decoder=decoder, resource_sets=resource_sets)
        return POSTS(self, provided_arguments(status=status), context)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from graphresolve.adapters.graphql import GraphQLFieldIntrospection
from graphresolve.domain.context import RequestContext

if TYPE_CHECKING:
    from graphresolve.domain.ports import GlobalIdDecoder, ResourceSetSource
    from graphresolve.domain.types import TypeDescriptor


class StrawberryFieldIntrospection(GraphQLFieldIntrospection):
    """Introspection that also understands the Python names of strawberry arguments."""

    def __init__(self, info: strawberry.Info) -> None:
        super().__init__(info._raw_info)  # noqa: SLF001
        self.strawberry_info = info
        self._name_converter = info.schema.config.name_converter

    def declared_argument_type(self, field_name: str, argument: str) -> TypeDescriptor | None:
        declared = self.declared_arguments(field_name)
        if argument in declared:
            return declared[argument]
        return declared.get(self._graphql_argument_name(argument))

    def _graphql_argument_name(self, python_name: str) -> str:
        field = getattr(self.strawberry_info, "_field", None)
        for argument in getattr(field, "arguments", ()):
            if argument.python_name == python_name:
                return self._name_converter.from_argument(argument)
        return self._name_converter.apply_naming_config(python_name)


def request_context(
    info: strawberry.Info,
    *,
    decoder: GlobalIdDecoder,
    resource_sets: ResourceSetSource,
) -> RequestContext:
    return RequestContext(
        introspection=StrawberryFieldIntrospection(info),
        decoder=decoder,
        resource_sets=resource_sets,
        state=info,
    )


def provided_arguments(**arguments: object) -> dict[str, object]:
    """Build an argument bag from resolver keyword arguments, dropping ``UNSET`` ones."""

    return {name: value for name, value in arguments.items() if value is not strawberry.UNSET}
