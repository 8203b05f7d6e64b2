"""In-memory stand-ins for the collaborators a resolver call needs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from graphresolve.domain import RequestContext

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from graphresolve.domain import TypeDescriptor


@dataclass(frozen=True, slots=True, kw_only=True)
class Row:
    id: int
    title: str = ""
    status: str = "draft"
    active: bool = True
    score: int = 0


@dataclass(frozen=True, slots=True)
class FakeResourceSet:
    """Immutable list-backed resource set that records the operations applied to it."""

    items: tuple[object, ...] = ()
    attributes: frozenset[str] = frozenset({"id", "title", "status", "active", "score"})
    scopes: Mapping[str, Callable[..., Iterable[object]]] = field(default_factory=dict)
    operations: tuple[tuple[object, ...], ...] = ()

    def responds_to(self, name: str) -> bool:
        return name in self.scopes

    def invoke(self, name: str, *args: object) -> FakeResourceSet:
        items = tuple(self.scopes[name](self.items, *args))
        return replace(self, items=items, operations=(*self.operations, ("invoke", name, *args)))

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def filter_by_equality(self, attribute: str, value: object) -> FakeResourceSet:
        if isinstance(value, Sequence) and not isinstance(value, str):
            items = tuple(item for item in self.items if getattr(item, attribute) in value)
        else:
            items = tuple(item for item in self.items if getattr(item, attribute) == value)
        return replace(
            self,
            items=items,
            operations=(*self.operations, ("filter", attribute, value)),
        )

    def materialize_all(self) -> list[object]:
        return list(self.items)

    def first(self) -> object | None:
        return self.items[0] if self.items else None


@dataclass(frozen=True, slots=True)
class FilterOnlySet:
    """Supports equality filters but exposes no named operations."""

    items: tuple[object, ...] = ()

    def has_attribute(self, name: str) -> bool:
        return name in {"id", "status"}

    def filter_by_equality(self, attribute: str, value: object) -> FilterOnlySet:
        return FilterOnlySet(tuple(i for i in self.items if getattr(i, attribute) == value))

    def materialize_all(self) -> list[object]:
        return list(self.items)

    def first(self) -> object | None:
        return self.items[0] if self.items else None


@dataclass(slots=True)
class FakeIntrospection:
    field_name: str = "posts"
    arguments: dict[str, TypeDescriptor] = field(default_factory=dict)
    connection: bool = False
    many: bool = True

    def current_field_name(self) -> str:
        return self.field_name

    def declared_arguments(self, field_name: str) -> Mapping[str, TypeDescriptor]:
        return self.arguments if field_name == self.field_name else {}

    def declared_argument_type(self, field_name: str, argument: str) -> TypeDescriptor | None:
        return self.declared_arguments(field_name).get(argument)

    def is_connection_field(self) -> bool:
        return self.connection

    def is_list_field(self) -> bool:
        return self.many


@dataclass(slots=True)
class FakeDecoder:
    nodes: dict[object, object] = field(default_factory=dict)
    calls: list[object] = field(default_factory=list)

    def decode(self, opaque_id: object, context: RequestContext) -> object | None:
        _ = context
        self.calls.append(opaque_id)
        return self.nodes.get(opaque_id)


@dataclass(slots=True)
class FakeSource:
    everything: object = field(default_factory=FakeResourceSet)
    relations: dict[str, object] = field(default_factory=dict)
    calls: list[tuple[str, object]] = field(default_factory=list)

    def all_of(self, model: type) -> object:
        self.calls.append(("all_of", model))
        return self.everything

    def related(self, parent: object, accessor: str) -> object:
        self.calls.append(("related", accessor))
        return self.relations[accessor]


def rows(*items: Row) -> FakeResourceSet:
    return FakeResourceSet(
        items=items,
        scopes={
            "only_active": lambda current: [row for row in current if row.active],
            "published": lambda current: [row for row in current if row.status == "published"],
            "min_score": lambda current, score: [row for row in current if row.score >= score],
        },
    )


def make_context(
    *,
    resource_set: object | None = None,
    introspection: FakeIntrospection | None = None,
    decoder: FakeDecoder | None = None,
    source: FakeSource | None = None,
) -> RequestContext:
    return RequestContext(
        introspection=introspection or FakeIntrospection(),
        decoder=decoder or FakeDecoder(),
        resource_sets=source or FakeSource(everything=resource_set or FakeResourceSet()),
    )
