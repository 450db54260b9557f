from __future__ import annotations

import typing as t


class MockConfigurationError(Exception):
    """The schema, the mock map, or a :class:`.MockList` was set up incorrectly.
    Raised while installing mocks, before any query runs.
    """


class MockSynthesisError(Exception):
    """A value was needed for a type that has neither a registered mock nor a
    default mock. Raised from inside a resolver, so it shows up as a field error
    in the execution result.

    :param type_name: The name of the type that could not be mocked.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return f'No mock defined for type "{self.type_name}"'


class SchemaError(Exception):
    """The type definitions or resolver map given to the schema builder don't
    describe a valid schema.
    """


class AuthorizationError(Exception):
    def __init__(self, errors: t.Union[t.List, t.Any]):
        if not isinstance(errors, list):
            errors = [errors]

        super().__init__(*errors)
        self.errors = errors
