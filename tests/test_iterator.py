from __future__ import annotations

import typing as t
from collections import Counter

import graphql
import pytest

import mockql

type_defs = """
type OtherType {
  aString(arg1: Int, arg2: String): String
  anInt: Int
}

type RootQuery {
  otherType(arg0: Boolean): OtherType
  node: Node
  search: SearchResult
  color: Color
}

interface Node {
  id: ID!
}

union SearchResult = OtherType

enum Color {
  RED
}

schema {
  query: RootQuery
}
"""


@pytest.fixture
def schema() -> graphql.GraphQLSchema:
    return graphql.build_schema(type_defs)


def test_for_each_type(schema: graphql.GraphQLSchema) -> None:
    """Every named type is visited once, except introspection types and built-in
    scalars.
    """
    names: list[str] = []
    mockql.SchemaIterator(schema).for_each_type(lambda type: names.append(type.name))
    assert Counter(names) == Counter(
        ["OtherType", "RootQuery", "Node", "SearchResult", "Color"]
    )


def test_for_each_field(schema: graphql.GraphQLSchema) -> None:
    """Every field of every object and interface is visited once, with the names of
    the field and its type.
    """
    seen: list[tuple[str, str]] = []

    def visit(field: graphql.GraphQLField, type_name: str, field_name: str) -> None:
        assert schema.get_type(type_name).fields[field_name] is field  # type: ignore
        seen.append((type_name, field_name))

    mockql.for_each_field(schema, visit)
    assert Counter(seen) == Counter(
        [
            ("OtherType", "aString"),
            ("OtherType", "anInt"),
            ("RootQuery", "otherType"),
            ("RootQuery", "node"),
            ("RootQuery", "search"),
            ("RootQuery", "color"),
            ("Node", "id"),
        ]
    )


def test_for_each_arg(schema: graphql.GraphQLSchema) -> None:
    """Every argument is visited once, in declaration order within its field."""
    seen: list[tuple[str, str, str]] = []

    def visit(
        arg: graphql.GraphQLArgument, type_name: str, field_name: str, arg_name: str
    ) -> None:
        seen.append((type_name, field_name, arg_name))

    mockql.for_each_arg(schema, visit)
    assert sorted(seen) == [
        ("OtherType", "aString", "arg1"),
        ("OtherType", "aString", "arg2"),
        ("RootQuery", "otherType", "arg0"),
    ]
    a_string = [s for s in seen if s[1] == "aString"]
    assert [s[2] for s in a_string] == ["arg1", "arg2"]


def test_circular_reference() -> None:
    """A type referencing itself is only visited once."""
    schema = graphql.build_schema(
        "type Query { user: User } type User { friend: User, friends: [User] }"
    )
    names: list[str] = []
    mockql.for_each_type(schema, lambda type: names.append(type.name))
    assert sorted(names) == ["Query", "User"]


def test_visitor_result_ignored(schema: graphql.GraphQLSchema) -> None:
    """Iteration does not stop based on the visitor's return value."""
    count = 0

    def visit(*args: t.Any) -> bool:
        nonlocal count
        count += 1
        return False

    mockql.for_each_field(schema, visit)
    assert count == 7
