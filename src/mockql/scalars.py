from __future__ import annotations

import typing as t
from datetime import datetime
from datetime import timezone

import graphql
from dateutil.parser import isoparse


def serialize_datetime(value: t.Any) -> t.Any:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)

        return value.isoformat()

    return value


def parse_datetime(value: str) -> datetime:
    try:
        out = isoparse(value)
    except (TypeError, ValueError) as e:
        raise graphql.GraphQLError(f"'{value}' is not a valid DateTime.") from e

    if out.tzinfo is None:
        return out.replace(tzinfo=timezone.utc)

    return out


DateTime = graphql.GraphQLScalarType(
    "DateTime",
    serialize=serialize_datetime,
    parse_value=parse_datetime,
    description="A date, time, and timezone in ISO 8601 format.",
    specified_by_url="ISO 8601",
)
"""Date, time, and timezone in ISO 8601 format. Uses dateutil's ``isoparse``. Input
without a timezone is assumed to be UTC. Always returns a timezone-aware
:class:`~datetime.datetime` value.
"""

custom_scalars: list[graphql.GraphQLScalarType] = [DateTime]
"""Scalars that are given an implementation when a schema built from type
definitions declares a scalar with the same name.
"""

_legacy_names = ("serialize", "parse_value")

# graphql-core 3.3 renamed the coercion functions.
_coerce_names = ("coerce_output_value", "coerce_input_value")


def _output_coercion(type: graphql.GraphQLScalarType) -> t.Any:
    if hasattr(type, "coerce_output_value"):
        return type.coerce_output_value

    return type.serialize


def install_scalars(schema: graphql.GraphQLSchema) -> None:
    """Give scalars declared in type definitions the behavior of the matching
    :data:`custom_scalars`. A scalar declared only by name in the schema language
    passes values through unchanged, so mutate it in place to serialize and parse
    like the implementation here.

    :param schema: A schema built from type definitions.
    """
    for scalar in custom_scalars:
        type = schema.get_type(scalar.name)

        if not isinstance(type, graphql.GraphQLScalarType) or type is scalar:
            continue

        names = _coerce_names if hasattr(type, _coerce_names[0]) else _legacy_names

        for name in names:
            setattr(type, name, getattr(scalar, name))

        if type.description is None:
            type.description = scalar.description


def is_implemented(type: graphql.GraphQLScalarType) -> bool:
    """Check if a scalar with the same name as one of the :data:`custom_scalars`
    uses that implementation, either by being that scalar or by having
    :func:`install_scalars` applied. Scalars with other names always pass.
    """
    for scalar in custom_scalars:
        if scalar.name == type.name:
            return type is scalar or _output_coercion(type) is _output_coercion(
                scalar
            )

    return True
