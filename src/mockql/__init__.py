from .decorate import add_decorators
from .decorate import apply_decorators
from .decorate import Decorator
from .decorate import Deprecated
from .decorate import Description
from .decorate import PreResolve
from .errors import AuthorizationError
from .errors import MockConfigurationError
from .errors import MockSynthesisError
from .errors import SchemaError
from .iterator import for_each_arg
from .iterator import for_each_field
from .iterator import for_each_type
from .iterator import SchemaIterator
from .logging import mockql_logger
from .mock import install_mocks
from .mock import mock_server
from .mock import MockResolverFactory
from .mock import MockServer
from .mock_list import MockList
from .registry import MockRegistry
from .scalars import DateTime
from .schema import add_resolve_functions_to_schema
from .schema import build_schema_from_type_definitions
from .schema import execute
from .schema import make_executable_schema

__all__ = [
    "add_decorators",
    "apply_decorators",
    "Decorator",
    "Deprecated",
    "Description",
    "PreResolve",
    "AuthorizationError",
    "MockConfigurationError",
    "MockSynthesisError",
    "SchemaError",
    "for_each_arg",
    "for_each_field",
    "for_each_type",
    "SchemaIterator",
    "mockql_logger",
    "install_mocks",
    "mock_server",
    "MockResolverFactory",
    "MockServer",
    "MockList",
    "MockRegistry",
    "DateTime",
    "add_resolve_functions_to_schema",
    "build_schema_from_type_definitions",
    "execute",
    "make_executable_schema",
]
