from __future__ import annotations

import random
import typing as t

import graphql
import pytest

from mockql import MockConfigurationError
from mockql import MockList
from mockql.mock_list import ResolverArgs

rng = random.Random()
int_list = graphql.GraphQLList(graphql.GraphQLInt)


def synthesize(type: graphql.GraphQLOutputType, args: ResolverArgs) -> t.Any:
    return str(type)


def test_fixed_length() -> None:
    args = ResolverArgs(None, None)

    for _ in range(20):
        value = MockList((2, 2)).realize(args, int_list, synthesize, rng)
        assert len(value) == 2

    value = MockList(5).realize(args, int_list, synthesize, rng)
    assert len(value) == 5


def test_range_length() -> None:
    args = ResolverArgs(None, None)
    mock_list = MockList([0, 5])
    lengths = {
        len(mock_list.realize(args, int_list, synthesize, rng)) for _ in range(200)
    }
    assert lengths <= {0, 1, 2, 3, 4, 5}
    assert len(lengths) > 1


def test_items_from_type() -> None:
    """Without a wrapped function, items are generated for the item type."""
    value = MockList(2).realize(ResolverArgs(None, None), int_list, synthesize, rng)
    assert value == ["Int", "Int"]


def test_wrapped() -> None:
    """The wrapped function is called with the resolver arguments for each item."""
    calls: list[t.Any] = []

    def wrapped(parent: t.Any, info: t.Any, **kwargs: t.Any) -> int:
        calls.append((parent, kwargs))
        return len(calls)

    args = ResolverArgs({"p": 1}, None, {"a": 2})
    value = MockList(3, wrapped).realize(args, int_list, synthesize, rng)
    assert value == [1, 2, 3]
    assert calls == [({"p": 1}, {"a": 2})] * 3


def test_nested() -> None:
    """A wrapped function returning a mock list generates a nested list."""
    type = graphql.GraphQLList(graphql.GraphQLNonNull(int_list))
    value = MockList(2, lambda *args, **kwargs: MockList(3)).realize(
        ResolverArgs(None, None), type, synthesize, rng
    )
    assert value == [["Int"] * 3] * 2


def test_not_list_type() -> None:
    with pytest.raises(MockConfigurationError, match="list types"):
        MockList(2).realize(
            ResolverArgs(None, None), graphql.GraphQLInt, synthesize, rng
        )


def test_wrapped_not_callable() -> None:
    with pytest.raises(MockConfigurationError, match="must be a function"):
        MockList(2, "a")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "length",
    [
        pytest.param(-1, id="negative"),
        pytest.param((3, 1), id="reversed"),
        pytest.param((-1, 1), id="negative range"),
        pytest.param((1, 2, 3), id="triple"),
        pytest.param("ab", id="str"),
        pytest.param(1.5, id="float"),
    ],
)
def test_invalid_length(length: t.Any) -> None:
    with pytest.raises(MockConfigurationError):
        MockList(length)


def test_not_cached() -> None:
    """Each realization generates a new list."""
    mock_list = MockList(2)
    args = ResolverArgs(None, None)
    a = mock_list.realize(args, int_list, synthesize, rng)
    b = mock_list.realize(args, int_list, synthesize, rng)
    assert a == b
    assert a is not b
