from __future__ import annotations

import typing as t

import graphql
from graphql import GraphQLError

from .mock import MockServer
from .schema import execute


def _execute(
    schema: graphql.GraphQLSchema | MockServer, source: str, **kwargs: t.Any
) -> graphql.ExecutionResult:
    if isinstance(schema, MockServer):
        return schema.query(source, **kwargs)

    return execute(schema, source, **kwargs)


def expect_data(
    schema: graphql.GraphQLSchema | MockServer, source: str, **kwargs: t.Any
) -> dict[str, t.Any]:
    """Execute an operation and return the data portion of the result. Raise an
    exception if there are any errors in the result.

    Raises the first error found, even if there are multiple errors.

    If the error is a plain GraphQL error, such as a missing required argument,
    it is raised directly. If the error is a wrapped exception, indicating an
    unhandled error in a resolver, such as :exc:`.MockSynthesisError`, the
    wrapped exception is raised.

    :param schema: A schema, or a :class:`.MockServer` to query.
    :param source: The operation to execute.
    :param kwargs: Passed to :func:`.execute`, or ``variables`` for a mock server.
    """
    result = _execute(schema, source, **kwargs)

    if result.errors:
        error = result.errors[0]

        if error.original_error:
            raise error.original_error

        raise error

    assert result.data is not None
    return result.data


def expect_errors(
    schema: graphql.GraphQLSchema | MockServer, source: str, **kwargs: t.Any
) -> list[GraphQLError]:
    """Execute an operation and return the errors portion of the result. Raise
    an error if there are no errors.
    """
    result = _execute(schema, source, **kwargs)
    assert result.errors is not None
    return result.errors


def expect_error(
    schema: graphql.GraphQLSchema | MockServer, source: str, **kwargs: t.Any
) -> GraphQLError:
    """Execute an operation and return the single error from the result. Raise
    an error if there is not exactly one error.
    """
    result = expect_errors(schema, source, **kwargs)

    if len(result) > 1:
        raise ValueError(
            "Expected query to return a single error, but it returned multiple."
        )

    return result[0]
