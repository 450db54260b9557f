from __future__ import annotations

import dataclasses
import random
import typing as t
from collections.abc import Sequence

import graphql
from graphql import GraphQLResolveInfo

from .errors import MockConfigurationError


@dataclasses.dataclass()
class ResolverArgs:
    """The arguments a resolver was called with, passed along to mock functions
    as they are called recursively.
    """

    parent: t.Any
    info: GraphQLResolveInfo | None
    kwargs: dict[str, t.Any] = dataclasses.field(default_factory=dict)

    def call(self, f: t.Callable[..., t.Any]) -> t.Any:
        """Call a resolver or mock function with these arguments."""
        return f(self.parent, self.info, **self.kwargs)


SynthesizeCallable = t.Callable[[graphql.GraphQLOutputType, ResolverArgs], t.Any]


class MockList:
    """Return this from a mock function to generate a list for a list field.

    .. code-block:: python

        mocks = {
            "Person": lambda *args, **kwargs: {
                "friends": lambda *args, **kwargs: MockList((2, 6)),
            },
        }

    :param length: The length of the list. Either an int, or a ``(low, high)``
        pair to pick a random length between, inclusive.
    :param wrapped: Called with the resolver arguments to generate each item. It
        may return another ``MockList`` to generate a nested list. If not given,
        items are mocked based on the list's item type.
    """

    def __init__(
        self,
        length: int | Sequence[int],
        wrapped: t.Callable[..., t.Any] | None = None,
    ) -> None:
        if isinstance(length, (bool, str)) or not isinstance(length, (int, Sequence)):
            raise MockConfigurationError(
                "MockList length must be an int or a (low, high) pair"
            )

        if isinstance(length, Sequence):
            if len(length) != 2 or length[0] > length[1]:
                raise MockConfigurationError(
                    "MockList length range must be a (low, high) pair with low <= high"
                )

            if length[0] < 0:
                raise MockConfigurationError("MockList length must not be negative")
        elif length < 0:
            raise MockConfigurationError("MockList length must not be negative")

        if wrapped is not None and not callable(wrapped):
            raise MockConfigurationError(
                "Second argument to MockList must be a function or None"
            )

        self.length = length
        self.wrapped = wrapped

    def __repr__(self) -> str:
        return f"<MockList {self.length!r}>"

    def get_length(self, rng: random.Random) -> int:
        if isinstance(self.length, Sequence):
            return rng.randint(self.length[0], self.length[1])

        return self.length

    def realize(
        self,
        args: ResolverArgs,
        field_type: graphql.GraphQLOutputType,
        synthesize: SynthesizeCallable,
        rng: random.Random,
    ) -> list[t.Any]:
        """Generate a list of values. A new list is generated each time this is
        called.

        :param args: The arguments the field's resolver was called with.
        :param field_type: The list type of the field, without non-null.
        :param synthesize: Generates a value for a type when no wrapped function
            was given.
        :param rng: Random source for picking the length.
        """
        if not isinstance(field_type, graphql.GraphQLList):
            raise MockConfigurationError(
                f"MockList can only generate values for list types, not {field_type}"
            )

        item_type = field_type.of_type
        out = []

        for _ in range(self.get_length(rng)):
            if self.wrapped is None:
                out.append(synthesize(item_type, args))
                continue

            value = args.call(self.wrapped)

            if isinstance(value, MockList):
                value = value.realize(
                    args, graphql.get_nullable_type(item_type), synthesize, rng
                )

            out.append(value)

        return out
