from __future__ import annotations

import random
import typing as t
import uuid
from collections.abc import Mapping
from datetime import datetime
from datetime import timezone

from .errors import MockConfigurationError

MockCallable = t.Callable[..., t.Any]
"""A mock function. Type mocks are called with the resolver arguments,
``mock(parent, info, **kwargs)``. Mocks for the query and mutation root types are
called with no arguments.
"""

default_rng = random.Random()
"""The process-wide random source used when none is given."""


def default_mocks(rng: random.Random) -> dict[str, MockCallable]:
    """Create the table of default mocks for built-in scalars, drawing random
    values from ``rng``.
    """
    return {
        "Int": lambda *args, **kwargs: rng.randint(-100, 100),
        "Float": lambda *args, **kwargs: rng.random() * 200 - 100,
        "String": lambda *args, **kwargs: "Hello World",
        "Boolean": lambda *args, **kwargs: rng.random() > 0.5,
        "ID": lambda *args, **kwargs: str(uuid.uuid4()),
        "DateTime": lambda *args, **kwargs: datetime.now(timezone.utc),
    }


class MockRegistry:
    """Holds the mock function for each type name given by the user, as well as
    the default mocks used for scalars the user did not mock.

    :param mocks: Maps type names to mock functions.
    :param rng: Random source for the default mocks.
    """

    def __init__(
        self,
        mocks: Mapping[str, MockCallable] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if mocks is None:
            mocks = {}

        if not isinstance(mocks, Mapping):
            raise MockConfigurationError(
                "mocks must be a mapping of type names to functions"
            )

        for name, mock in mocks.items():
            if not callable(mock):
                raise MockConfigurationError(f"mocks[{name!r}] must be a function")

        self.mocks: dict[str, MockCallable] = dict(mocks)
        """Mocks given by the user, by type name."""

        self.rng: random.Random = rng if rng is not None else default_rng

        self.defaults: dict[str, MockCallable] = default_mocks(self.rng)
        """Default mocks for built-in scalars, used when the user did not give a
        mock for that type.
        """

    def __contains__(self, name: str) -> bool:
        return name in self.mocks

    def get(self, name: str) -> MockCallable | None:
        """Get the user's mock for a type name, or ``None``."""
        return self.mocks.get(name)

    def get_default(self, name: str) -> MockCallable | None:
        """Get the default mock for a scalar type name, or ``None``."""
        return self.defaults.get(name)
