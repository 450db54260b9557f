from __future__ import annotations

import logging
import typing as t

import graphql
from graphql import GraphQLResolveInfo

from .iterator import SchemaIterator

logger = logging.getLogger(__name__)

DECORATORS_KEY = "decorators"
"""The key in a node's ``extensions`` dict that holds its list of decorators."""

DecoratorCallable = t.Callable[[t.Any], t.Any]


class Decorator:
    """Base class for a transformation attached to a schema node. Configuration
    is passed when creating the instance, then :meth:`apply` is called with the
    node when the schema is decorated.

    Any callable that takes the node works as a decorator, instances of this
    class are just callables with a name and saved configuration.
    """

    def apply(self, node: t.Any) -> None:
        raise NotImplementedError

    def __call__(self, node: t.Any) -> None:
        self.apply(node)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class Description(Decorator):
    """Set the help text shown in the schema for a type or field.

    :param text: The description.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def apply(self, node: t.Any) -> None:
        node.description = self.text


class Deprecated(Decorator):
    """Mark a field as deprecated.

    :param reason: Deprecation message to show in the schema.
    """

    def __init__(self, reason: str = graphql.DEFAULT_DEPRECATION_REASON) -> None:
        self.reason = reason

    def apply(self, node: graphql.GraphQLField) -> None:
        node.deprecation_reason = self.reason


class PreResolve(Decorator):
    """Call a function at the beginning of the resolve process for a field,
    before the field's resolver. The function is called with the same arguments
    as the resolver, and its return value is ignored.

    This is useful to check permissions or log access. Raise an exception, such
    as :exc:`.AuthorizationError`, to stop with an error instead.

    The field's current resolver is wrapped when the decorator is applied. Field
    decorators run before any resolver installed afterwards, such as by
    :func:`.install_mocks`, which will replace the wrapper.

    :param check: The function to call before resolving.
    """

    def __init__(self, check: t.Callable[..., t.Any]) -> None:
        self.check = check

    def apply(self, node: graphql.GraphQLField) -> None:
        resolve = node.resolve

        if resolve is None:
            resolve = graphql.default_field_resolver

        check = self.check

        def pre_resolve(
            parent: t.Any, info: GraphQLResolveInfo, **kwargs: t.Any
        ) -> t.Any:
            check(parent, info, **kwargs)
            return resolve(parent, info, **kwargs)  # type: ignore[misc]

        node.resolve = pre_resolve


def add_decorators(node: t.Any, *decorators: DecoratorCallable) -> None:
    """Attach decorators to a type, field, or argument. They are stored in the
    node's ``extensions`` and applied, in the order they were added, by
    :func:`apply_decorators`.

    :param node: A GraphQL-Core named type, field, or argument.
    :param decorators: Callables that take the node.
    """
    if node.extensions is None:
        node.extensions = {}

    node.extensions.setdefault(DECORATORS_KEY, []).extend(decorators)


def get_decorators(node: t.Any) -> list[DecoratorCallable]:
    extensions = getattr(node, "extensions", None)

    if not extensions:
        return []

    return extensions.get(DECORATORS_KEY) or []


def _apply(decorators: list[DecoratorCallable], node: t.Any, path: str) -> None:
    logger.debug("Applying %d decorators to %s.", len(decorators), path)

    for decorator in decorators:
        try:
            decorator(node)
        except Exception:
            logger.error(
                "Decorator %r failed on %s, remaining decorators were not applied.",
                decorator,
                path,
            )
            raise


def apply_decorators(schema: graphql.GraphQLSchema) -> None:
    """Apply the decorators attached to the fields and types of a schema. The
    schema is modified in place.

    Decorators are applied innermost first. All field decorators are applied,
    then all type decorators, so a type decorator sees any changes made to its
    fields. Decorators attached to arguments or to the schema itself are not
    applied.

    If a decorator raises an exception, it is not handled, and the remaining
    decorators are not applied. The schema will be partially decorated.

    :param schema: The schema to decorate.
    """
    iterator = SchemaIterator(schema)

    for field, type_name, field_name in iterator.fields():
        decorators = get_decorators(field)

        if decorators:
            _apply(decorators, field, f"field {type_name}.{field_name}")

    for type in iterator.types():
        decorators = get_decorators(type)

        if decorators:
            _apply(decorators, type, f"type {type.name}")
