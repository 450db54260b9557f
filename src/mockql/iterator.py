from __future__ import annotations

import typing as t

import graphql

BUILTIN_SCALARS: frozenset[str] = frozenset({"Int", "String", "Boolean", "Float", "ID"})
"""Names of the scalars defined by GraphQL itself. They are never visited."""

INTROSPECTION_PREFIX = "__"


class TypeVisitor(t.Protocol):
    def __call__(self, type: graphql.GraphQLNamedType) -> t.Any:
        ...


class FieldVisitor(t.Protocol):
    def __call__(
        self, field: graphql.GraphQLField, type_name: str, field_name: str
    ) -> t.Any:
        ...


class ArgVisitor(t.Protocol):
    def __call__(
        self,
        arg: graphql.GraphQLArgument,
        type_name: str,
        field_name: str,
        arg_name: str,
    ) -> t.Any:
        ...


class SchemaIterator:
    """Visit every type, field, or argument defined in a schema, once each.

    Iteration is over the schema's name to type index, not over the references
    between types, so self-referencing and mutually referencing types are safe.
    Introspection types and the built-in scalars are skipped. Only objects and
    interfaces have fields.

    GraphQL-Core fields and arguments don't know their own names, so the
    visitor is also given the names of the node and its parents.

    :param schema: The schema to visit. Visitor functions may modify nodes in
        place, but should not add or remove types while iterating.
    """

    def __init__(self, schema: graphql.GraphQLSchema) -> None:
        self.schema = schema

    def types(self) -> t.Iterator[graphql.GraphQLNamedType]:
        for name, type in self.schema.type_map.items():
            if name.startswith(INTROSPECTION_PREFIX) or name in BUILTIN_SCALARS:
                continue

            yield type

    def fields(self) -> t.Iterator[tuple[graphql.GraphQLField, str, str]]:
        for type in self.types():
            if not isinstance(
                type, (graphql.GraphQLObjectType, graphql.GraphQLInterfaceType)
            ):
                continue

            for field_name, field in type.fields.items():
                yield field, type.name, field_name

    def args(self) -> t.Iterator[tuple[graphql.GraphQLArgument, str, str, str]]:
        for field, type_name, field_name in self.fields():
            if not field.args:
                continue

            for arg_name, arg in field.args.items():
                yield arg, type_name, field_name, arg_name

    def for_each_type(self, fn: TypeVisitor) -> None:
        """Call ``fn(type)`` for each named type."""
        for type in self.types():
            fn(type)

    def for_each_field(self, fn: FieldVisitor) -> None:
        """Call ``fn(field, type_name, field_name)`` for each field of each object
        and interface.
        """
        for field, type_name, field_name in self.fields():
            fn(field, type_name, field_name)

    def for_each_arg(self, fn: ArgVisitor) -> None:
        """Call ``fn(arg, type_name, field_name, arg_name)`` for each argument of
        each field, in the order the arguments were declared.
        """
        for arg, type_name, field_name, arg_name in self.args():
            fn(arg, type_name, field_name, arg_name)


def for_each_type(schema: graphql.GraphQLSchema, fn: TypeVisitor) -> None:
    SchemaIterator(schema).for_each_type(fn)


def for_each_field(schema: graphql.GraphQLSchema, fn: FieldVisitor) -> None:
    SchemaIterator(schema).for_each_field(fn)


def for_each_arg(schema: graphql.GraphQLSchema, fn: ArgVisitor) -> None:
    SchemaIterator(schema).for_each_arg(fn)
