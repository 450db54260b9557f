from __future__ import annotations

import logging
import random
import typing as t
from collections.abc import Mapping

import graphql
from graphql import GraphQLResolveInfo
from inflection import camelize
from inflection import underscore

from .errors import MockConfigurationError
from .errors import MockSynthesisError
from .iterator import SchemaIterator
from .mock_list import MockList
from .mock_list import ResolverArgs
from .registry import MockCallable
from .registry import MockRegistry
from .schema import build_schema_from_type_definitions
from .scalars import is_implemented
from .schema import execute

logger = logging.getLogger(__name__)

TYPENAME_KEY = "typename"
"""Key added to mocked union and interface values, naming the object type that
was picked. Used by :func:`resolve_mocked_type` to tell GraphQL the type.
"""


class ResolverCallable(t.Protocol):
    """The signature that all resolver functions must have."""

    def __call__(
        self, parent: t.Any, info: GraphQLResolveInfo, **kwargs: t.Any
    ) -> t.Any:
        ...


def get_property(parent: t.Any, name: str) -> t.Any:
    """Get the value for a field from its parent value. A mapping is looked up by
    key. Any other object is looked up by attribute, using the field name, then
    the snake case version of the name. Returns :data:`graphql.Undefined` if the
    parent doesn't define the field, which is not the same as a value of ``None``.
    """
    if parent is None:
        return graphql.Undefined

    if isinstance(parent, Mapping):
        return parent.get(name, graphql.Undefined)

    value = getattr(parent, name, graphql.Undefined)

    if value is graphql.Undefined:
        python_name = underscore(name)

        if python_name != name:
            value = getattr(parent, python_name, graphql.Undefined)

    return value


def get_fields(value: t.Any) -> dict[str, t.Any] | None:
    """Get the field values of a structured value as a dict. A mapping is
    copied. Any other object with attributes gives its public attributes, also
    under their camel case names so either name finds a field. Returns ``None``
    for values without fields, such as strings and numbers.
    """
    if isinstance(value, Mapping):
        return dict(value)

    try:
        attrs = vars(value)
    except TypeError:
        return None

    public = {name: item for name, item in attrs.items() if not name.startswith("_")}
    out = {camelize(name, False): item for name, item in public.items()}
    out.update(public)
    return out


def merge_mocks(generic: t.Callable[[], t.Any], custom: t.Any) -> t.Any:
    """Complete a custom value with any fields from a type's generic mock. Fields
    in the custom value take precedence. A list is merged item by item, and may
    be nested. A mapping or an object with attributes becomes a dict with the
    fields of both, see :func:`get_fields`. Anything else is returned unchanged.

    :param generic: Called to generate a generic value for each structured
        value.
    :param custom: The value to complete.
    """
    if isinstance(custom, list):
        return [merge_mocks(generic, item) for item in custom]

    fields = get_fields(custom)

    if fields is not None:
        base = get_fields(generic())

        if base is not None:
            return {**base, **fields}

    return custom


def resolve_mocked_type(
    value: t.Any, info: GraphQLResolveInfo, abstract_type: graphql.GraphQLAbstractType
) -> str | None:
    """Resolve a mocked union or interface value to one of its object types, by
    looking up the name in the value's ``typename``.
    """
    name = get_property(value, TYPENAME_KEY)

    if not isinstance(name, str):
        return None

    type = info.schema.get_type(name)

    if type is None:
        return None

    return type.name


class MockResolverFactory:
    """Creates and installs mock resolvers for every field in a schema.

    Each time a mock resolver is called, it generates a value using this order of
    precedence:

    1.  If the parent value defines the field, use that value. If the value is a
        function, call it to get the value. If there is a mock for the field's
        type, use it to fill in keys missing from the value.
    2.  If the field is a list, generate a list of two items.
    3.  If there is a mock for the field's type, call it.
    4.  Otherwise, generate a value based on the type. Objects are empty dicts.
        Unions and interfaces pick a random object type. Enums pick a random
        value. Built-in scalars use default mocks.

    If none of these apply, :exc:`.MockSynthesisError` is raised.

    Use :func:`install_mocks` rather than creating this directly.

    :param schema: The schema to modify in place.
    :param registry: The mock functions to use.
    :param preserve_resolvers: Keep resolvers that are already defined, merging
        their results with the mocked values.
    """

    def __init__(
        self,
        schema: graphql.GraphQLSchema,
        registry: MockRegistry,
        preserve_resolvers: bool = False,
    ) -> None:
        self.schema = schema
        self.registry = registry
        self.preserve_resolvers = preserve_resolvers

    @property
    def rng(self) -> random.Random:
        return self.registry.rng

    def install(self) -> None:
        """Replace or wrap the resolver of every field in the schema."""
        root_names = {
            type.name
            for type in (self.schema.query_type, self.schema.mutation_type)
            if type is not None
        }

        for field, type_name, field_name in SchemaIterator(self.schema).fields():
            self.assign_resolve_type(field.type)

            # No resolver runs before root fields, so there is no parent value to
            # look in. Pretend there was one, containing the root mock's value.
            if type_name in root_names and type_name in self.registry:
                root_mock = t.cast(MockCallable, self.registry.get(type_name))
                root_value = get_property(root_mock(), field_name)

                if root_value is not None and root_value is not graphql.Undefined:
                    field.resolve = self.mock_root_field(root_mock, field, field_name)
                    logger.debug(
                        "Installed root mock for %s.%s.", type_name, field_name
                    )
                    continue

            if not self.preserve_resolvers or field.resolve is None:
                field.resolve = self.mock_type(field.type, field_name)
            else:
                field.resolve = self.preserve_resolver(field.resolve, field, field_name)

            logger.debug("Installed mock resolver for %s.%s.", type_name, field_name)

    def assign_resolve_type(self, type: graphql.GraphQLOutputType) -> None:
        """Unions and interfaces need to be able to tell GraphQL which object type a
        value is. Use the ``typename`` added to mocked values.
        """
        named_type = graphql.get_named_type(type)

        if not isinstance(
            named_type, (graphql.GraphQLUnionType, graphql.GraphQLInterfaceType)
        ):
            return

        if self.preserve_resolvers and named_type.resolve_type is not None:
            return

        named_type.resolve_type = resolve_mocked_type

    def mock_root_field(
        self, root_mock: MockCallable, field: graphql.GraphQLField, field_name: str
    ) -> ResolverCallable:
        mock_field = self.mock_type(field.type, field_name)

        def resolve(parent: t.Any, info: GraphQLResolveInfo, **kwargs: t.Any) -> t.Any:
            if isinstance(parent, Mapping):
                root = dict(parent)
            else:
                root = {}

            root[field_name] = get_property(root_mock(), field_name)
            return mock_field(root, info, **kwargs)

        return resolve

    def preserve_resolver(
        self, resolver: ResolverCallable, field: graphql.GraphQLField, field_name: str
    ) -> ResolverCallable:
        mock_field = self.mock_type(field.type, field_name)

        def resolve(parent: t.Any, info: GraphQLResolveInfo, **kwargs: t.Any) -> t.Any:
            mocked = mock_field(parent, info, **kwargs)
            resolved = resolver(parent, info, **kwargs)

            if isinstance(mocked, Mapping) and isinstance(resolved, Mapping):
                return {**mocked, **resolved}

            return resolved

        return resolve

    def mock_type(
        self, type: graphql.GraphQLOutputType, field_name: str | None = None
    ) -> ResolverCallable:
        """Create a resolver that generates a value for a type.

        :param type: The type of the field being resolved.
        :param field_name: The name of the field being resolved, to look for in
            the parent value. ``None`` for list items, which are not fields.
        """

        def resolve(parent: t.Any, info: GraphQLResolveInfo, **kwargs: t.Any) -> t.Any:
            args = ResolverArgs(parent, info, kwargs)
            return self.resolve_value(type, field_name, args)

        return resolve

    def resolve_value(
        self,
        type: graphql.GraphQLOutputType,
        field_name: str | None,
        args: ResolverArgs,
    ) -> t.Any:
        # Nullability doesn't matter when mocking.
        field_type = graphql.get_nullable_type(type)
        named_type = graphql.get_named_type(field_type)
        value = graphql.Undefined

        if field_name is not None:
            value = get_property(args.parent, field_name)

        if value is graphql.Undefined:
            return self.synthesize(field_type, args)

        if callable(value):
            value = args.call(value)

            if isinstance(value, MockList):
                value = value.realize(args, field_type, self.synthesize, self.rng)

        # Fill in the value from the mock for its type. This allows overriding the
        # type's mock while writing very little code.
        mock = self.registry.get(named_type.name)

        if mock is not None and not graphql.is_leaf_type(named_type):
            value = merge_mocks(lambda: args.call(mock), value)

        return value

    def synthesize(self, type: graphql.GraphQLOutputType, args: ResolverArgs) -> t.Any:
        """Generate a value for a type, when the parent doesn't define a value.

        :param type: The type to generate a value for.
        :param args: The arguments the field's resolver was called with.
        """
        type = graphql.get_nullable_type(type)

        if isinstance(type, graphql.GraphQLList):
            return [self.synthesize(type.of_type, args) for _ in range(2)]

        mock = self.registry.get(type.name)

        if mock is not None:
            return args.call(mock)

        if isinstance(type, graphql.GraphQLObjectType):
            # Objects don't have a value, only their fields do.
            return {}

        if isinstance(type, graphql.GraphQLUnionType):
            return self.synthesize_abstract(self.rng.choice(type.types), args)

        if isinstance(type, graphql.GraphQLInterfaceType):
            possible_types = self.schema.get_possible_types(type)

            if not possible_types:
                raise MockSynthesisError(type.name)

            return self.synthesize_abstract(self.rng.choice(possible_types), args)

        if isinstance(type, graphql.GraphQLEnumType):
            return self.rng.choice(list(type.values.values())).value

        if isinstance(type, graphql.GraphQLScalarType) and is_implemented(type):
            default = self.registry.get_default(type.name)

            if default is not None:
                return args.call(default)

        # Returning None would hide the missing mock and be hard to debug.
        raise MockSynthesisError(type.name)

    def synthesize_abstract(
        self, type: graphql.GraphQLObjectType, args: ResolverArgs
    ) -> dict[str, t.Any]:
        value = self.synthesize(type, args)
        out: dict[str, t.Any] = {TYPENAME_KEY: type.name}

        fields = get_fields(value)

        if fields is not None:
            out.update(fields)

        return out


def install_mocks(
    schema: graphql.GraphQLSchema,
    mocks: Mapping[str, MockCallable] | None = None,
    preserve_resolvers: bool = False,
    rng: random.Random | None = None,
) -> None:
    """Install a mock resolver on every field of a schema, so that queries
    return generated values. The schema is modified in place.

    .. code-block:: python

        install_mocks(schema, {
            "Int": lambda *args, **kwargs: 12,
            "Person": lambda *args, **kwargs: {"name": "Ada"},
            "Query": lambda: {"people": lambda *args, **kwargs: MockList(3)},
        })

    :param schema: The schema to mock.
    :param mocks: Maps type names to mock functions. A type mock is called with
        the resolver arguments, ``(parent, info, **kwargs)``, and returns a value
        for that type. Mocks for the query and mutation types are called with no
        arguments, and return a dict of top-level field values.
    :param preserve_resolvers: Keep resolvers already defined in the schema. If
        both the resolver and the mock return dicts, they are merged with the
        resolver's keys taking precedence, otherwise the resolver's value is
        used.
    :param rng: Random source used to pick list lengths, types, and enum values,
        and for the default scalar mocks.
    """
    if schema is None:
        raise MockConfigurationError("Must provide schema to mock")

    registry = MockRegistry(mocks, rng=rng)
    MockResolverFactory(schema, registry, preserve_resolvers).install()


class MockServer:
    """Execute queries against a mocked schema. Created by :func:`mock_server`.

    :param schema: The mocked schema.
    """

    def __init__(self, schema: graphql.GraphQLSchema) -> None:
        self.schema = schema

    def query(
        self, source: str, variables: dict[str, t.Any] | None = None
    ) -> graphql.ExecutionResult:
        """Execute a query or mutation and return the result.

        :param source: The operation written in the GraphQL language.
        :param variables: Values for variables used in the operation.
        """
        return execute(self.schema, source, root={}, context={}, variables=variables)


def mock_server(
    schema: graphql.GraphQLSchema | str | list[str],
    mocks: Mapping[str, MockCallable] | None = None,
    preserve_resolvers: bool = False,
) -> MockServer:
    """Mock a schema and return an object to query it with. Shortcut for calling
    :func:`install_mocks` then :func:`.execute`.

    :param schema: A schema, or type definitions to build one from.
    :param mocks: Maps type names to mock functions, see :func:`install_mocks`.
    :param preserve_resolvers: Keep resolvers already defined in the schema.
    """
    if not isinstance(schema, graphql.GraphQLSchema):
        schema = build_schema_from_type_definitions(schema)

    install_mocks(schema, mocks, preserve_resolvers)
    return MockServer(schema)
