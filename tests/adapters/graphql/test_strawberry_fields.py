"""Resolvers wired into a strawberry schema over the SQLite blog."""

from __future__ import annotations

import strawberry
from sqlalchemy.orm import Session  # noqa: TC002
from strawberry.relay import GlobalID

from graphresolve.adapters.sqlalchemy import SqlAlchemyNodeDecoder, SqlAlchemyResourceSets
from graphresolve.adapters.strawberry import (
    StrawberryFieldIntrospection,
    provided_arguments,
    request_context,
)
from graphresolve.domain import ID, RequestContext, Resolver, TypeDescriptor
from tests.support.blog import Author, Post, blog_scopes, seed_blog


class PostResolver(Resolver, model=Post):
    pass


PostResolver.register("status")
PostResolver.register("only_active", scope="only_active")
PostResolver.register("min_score", scope="min_score", with_value=True)

POSTS = PostResolver()
observed: list[RequestContext] = []


def _context(info: strawberry.Info) -> RequestContext:
    session: Session = info.context["session"]
    context = request_context(
        info,
        decoder=SqlAlchemyNodeDecoder(session, {"Post": Post, "Author": Author}),
        resource_sets=SqlAlchemyResourceSets(session, blog_scopes),
    )
    observed.append(context)
    return context


@strawberry.type
class AuthorType:
    name: str


@strawberry.type
class PostType:
    title: str
    status: str
    author: AuthorType | None


@strawberry.type
class Query:
    @strawberry.field
    def posts(
        self,
        info: strawberry.Info,
        status: str | None = strawberry.UNSET,
        only_active: bool | None = strawberry.UNSET,
        min_score: int | None = strawberry.UNSET,
    ) -> list[PostType]:
        arguments = provided_arguments(status=status, only_active=only_active, min_score=min_score)
        return POSTS(None, arguments, _context(info))  # type: ignore[return-value]

    @strawberry.field
    def post(self, info: strawberry.Info, id: strawberry.ID) -> PostType | None:  # noqa: A002
        return POSTS(None, {"id": id}, _context(info))  # type: ignore[return-value]


schema = strawberry.Schema(query=Query)


def _titles(data: object, field: str) -> list[str]:
    assert isinstance(data, dict)
    return [post["title"] for post in data[field]]


def test_argument_bag_drops_unset_values() -> None:
    assert provided_arguments(status="draft", only_active=strawberry.UNSET) == {"status": "draft"}


def test_filters_and_scopes_through_strawberry(sqlite_session: Session) -> None:
    seed_blog(sqlite_session)

    result = schema.execute_sync(
        "{ posts(status: \"published\", onlyActive: true) { title author { name } } }",
        context_value={"session": sqlite_session},
    )

    assert result.errors is None
    assert result.data == {
        "posts": [
            {"title": "Engines", "author": {"name": "Ada"}},
            {"title": "Debugging", "author": {"name": "Grace"}},
        ]
    }


def test_scope_with_value_through_strawberry(sqlite_session: Session) -> None:
    seed_blog(sqlite_session)

    result = schema.execute_sync(
        "{ posts(minScore: 5) { title } }", context_value={"session": sqlite_session}
    )

    assert result.errors is None
    assert sorted(_titles(result.data, "posts")) == ["Compilers", "Engines"]


def test_global_id_lookup_through_strawberry(sqlite_session: Session) -> None:
    blog = seed_blog(sqlite_session)
    notes = blog.posts[1]
    query = "query ($id: ID!) { post(id: $id) { title } }"

    found = schema.execute_sync(
        query,
        variable_values={"id": str(GlobalID(type_name="Post", node_id=str(notes.id)))},
        context_value={"session": sqlite_session},
    )
    missing = schema.execute_sync(
        query,
        variable_values={"id": str(GlobalID(type_name="Post", node_id="999"))},
        context_value={"session": sqlite_session},
    )

    assert found.errors is None
    assert found.data == {"post": {"title": "Notes"}}
    assert missing.errors is None
    assert missing.data == {"post": None}


def test_strawberry_introspection_maps_python_argument_names(sqlite_session: Session) -> None:
    seed_blog(sqlite_session)
    observed.clear()

    schema.execute_sync("{ posts { title } }", context_value={"session": sqlite_session})

    context = observed[-1]
    introspection = context.introspection
    assert isinstance(introspection, StrawberryFieldIntrospection)
    assert context.state is introspection.strawberry_info
    assert introspection.current_field_name() == "posts"
    assert introspection.is_list_field()
    assert not introspection.is_connection_field()
    assert introspection.declared_argument_type("posts", "only_active") == TypeDescriptor.named(
        "Boolean"
    )
    assert introspection.declared_argument_type("posts", "onlyActive") == TypeDescriptor.named(
        "Boolean"
    )
    assert introspection.declared_argument_type("post", "id") == TypeDescriptor.non_null(ID)
