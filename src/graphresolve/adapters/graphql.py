"""Field introspection over graphql-core resolve info."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from graphql import (
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    get_named_type,
    get_nullable_type,
)

from graphresolve.domain.types import TypeDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from graphql import GraphQLField, GraphQLNamedType, GraphQLResolveInfo, GraphQLType

CONNECTION_SUFFIX: Final[str] = "Connection"
CONNECTION_FIELDS: Final[frozenset[str]] = frozenset({"edges", "pageInfo"})


def describe_type(graphql_type: GraphQLType) -> TypeDescriptor:
    """Translate a possibly wrapped graphql-core type into a ``TypeDescriptor``."""

    if isinstance(graphql_type, GraphQLNonNull):
        return TypeDescriptor.non_null(describe_type(graphql_type.of_type))
    if isinstance(graphql_type, GraphQLList):
        return TypeDescriptor.list_of(describe_type(graphql_type.of_type))
    return TypeDescriptor.named(get_named_type(graphql_type).name)


def is_connection_type(named_type: GraphQLNamedType | None) -> bool:
    """Relay connections are ``*Connection`` object types exposing edges and pageInfo."""

    return (
        isinstance(named_type, GraphQLObjectType)
        and named_type.name.endswith(CONNECTION_SUFFIX)
        and CONNECTION_FIELDS <= named_type.fields.keys()
    )


class GraphQLFieldIntrospection:
    def __init__(self, info: GraphQLResolveInfo) -> None:
        self.info = info

    def current_field_name(self) -> str:
        return self.info.field_name

    def _field(self, field_name: str) -> GraphQLField | None:
        return self.info.parent_type.fields.get(field_name)

    def declared_arguments(self, field_name: str) -> Mapping[str, TypeDescriptor]:
        field = self._field(field_name)
        if field is None:
            return {}
        return {name: describe_type(argument.type) for name, argument in field.args.items()}

    def declared_argument_type(self, field_name: str, argument: str) -> TypeDescriptor | None:
        return self.declared_arguments(field_name).get(argument)

    def is_connection_field(self) -> bool:
        return is_connection_type(get_named_type(self.info.return_type))

    def is_list_field(self) -> bool:
        return isinstance(get_nullable_type(self.info.return_type), GraphQLList)
