from __future__ import annotations

import typing as t
from collections.abc import Sequence

import graphql

from .errors import SchemaError
from .scalars import install_scalars

ResolverMap = t.Mapping[str, t.Mapping[str, t.Callable[..., t.Any]]]

RESOLVE_TYPE_KEY = "__resolveType"
"""Key in a type's resolver map that sets the union or interface type resolver."""


def build_schema_from_type_definitions(
    type_defs: str | graphql.Source | t.Sequence[str],
) -> graphql.GraphQLSchema:
    """Build a schema from type definitions written in the GraphQL schema
    language. Scalars that mockql implements, such as ``DateTime``, get that
    implementation if they are declared.

    :param type_defs: The type definitions, as a single string or a list of
        strings that are joined together.
    """
    if not isinstance(type_defs, (str, graphql.Source)):
        if isinstance(type_defs, Sequence):
            type_defs = "\n".join(type_defs)
        else:
            raise SchemaError(
                "Type definitions must be a string or a list of strings, not"
                f" {type(type_defs).__name__}."
            )

    body = type_defs.body if isinstance(type_defs, graphql.Source) else type_defs

    if not body.strip():
        raise SchemaError("Must provide type definitions.")

    schema = graphql.build_schema(type_defs)
    install_scalars(schema)
    return schema


def add_resolve_functions_to_schema(
    schema: graphql.GraphQLSchema, resolvers: ResolverMap
) -> None:
    """Set resolver functions on the fields of a schema, modifying it in place.

    .. code-block:: python

        add_resolve_functions_to_schema(schema, {
            "Query": {"user": resolve_user},
            "Node": {"__resolveType": resolve_node_type},
        })

    :param schema: The schema to modify.
    :param resolvers: Maps type names to dicts mapping field names to resolver
        functions. The ``__resolveType`` key sets the type resolver of a union or
        interface.
    """
    for type_name, field_resolvers in resolvers.items():
        type = schema.get_type(type_name)

        if type is None:
            raise SchemaError(f"'{type_name}' defined in resolvers, but not in schema.")

        for field_name, resolve in field_resolvers.items():
            if field_name == RESOLVE_TYPE_KEY:
                if not isinstance(
                    type, (graphql.GraphQLUnionType, graphql.GraphQLInterfaceType)
                ):
                    raise SchemaError(
                        f"'{type_name}.{field_name}' can only be defined for unions"
                        " and interfaces."
                    )

                type.resolve_type = resolve
                continue

            fields = getattr(type, "fields", None)

            if fields is None or field_name not in fields:
                raise SchemaError(
                    f"'{type_name}.{field_name}' defined in resolvers, but not in"
                    " schema."
                )

            fields[field_name].resolve = resolve


def make_executable_schema(
    type_defs: str | graphql.Source | t.Sequence[str],
    resolvers: ResolverMap | None = None,
) -> graphql.GraphQLSchema:
    """Build a schema from type definitions and set its resolvers. Shortcut for
    :func:`build_schema_from_type_definitions` followed by
    :func:`add_resolve_functions_to_schema`.
    """
    schema = build_schema_from_type_definitions(type_defs)

    if resolvers:
        add_resolve_functions_to_schema(schema, resolvers)

    return schema


def execute(
    schema: graphql.GraphQLSchema,
    source: str | graphql.Source,
    root: t.Any = None,
    context: t.Any = None,
    variables: dict[str, t.Any] | None = None,
    operation: str | None = None,
) -> graphql.ExecutionResult:
    """Execute a GraphQL operation (query or mutation). Shortcut for calling
    :func:`graphql.graphql_sync`.

    Only the basic arguments to ``graphql_sync`` are accepted, advanced use should
    call it directly.

    :param schema: The schema to execute the operation on.
    :param source: The operation (query or mutation) written in GraphQL language to
        execute on the schema.
    :param root: The parent data passed to top-level field resolvers.
    :param context: Passed to resolvers as ``info.context``.
    :param variables: Maps placeholder names in the source to input values passed
        along with the request.
    :param operation: The name of the operation if the source defines multiple.
    """
    return graphql.graphql_sync(
        schema,
        source=source,
        root_value=root,
        context_value=context,
        variable_values=variables,
        operation_name=operation,
    )
