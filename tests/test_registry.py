from __future__ import annotations

import random

import pytest

from mockql import MockConfigurationError
from mockql import MockRegistry


def test_defaults() -> None:
    registry = MockRegistry()
    assert "Int" not in registry
    assert registry.get("Int") is None
    default = registry.get_default("Int")
    assert default is not None
    assert -100 <= default() <= 100
    assert registry.get_default("String")() == "Hello World"  # type: ignore[misc]
    assert registry.get_default("Custom") is None


def test_user_mocks() -> None:
    def mock_int() -> int:
        return 1

    registry = MockRegistry({"Int": mock_int})
    assert "Int" in registry
    assert registry.get("Int") is mock_int


def test_mocks_copied() -> None:
    mocks = {"Int": lambda: 1}
    registry = MockRegistry(mocks)
    mocks["Float"] = lambda: 1.0
    assert "Float" not in registry


def test_rng() -> None:
    """The default mocks draw from the given random source."""
    a = MockRegistry(rng=random.Random(1))
    b = MockRegistry(rng=random.Random(1))
    values_a = [a.get_default("Float")() for _ in range(5)]  # type: ignore[misc]
    values_b = [b.get_default("Float")() for _ in range(5)]  # type: ignore[misc]
    assert values_a == values_b


@pytest.mark.parametrize("mocks", [[("Int", lambda: 1)], "Int", 1])
def test_not_mapping(mocks: object) -> None:
    with pytest.raises(MockConfigurationError, match="mapping"):
        MockRegistry(mocks)  # type: ignore[arg-type]


def test_not_callable() -> None:
    with pytest.raises(MockConfigurationError, match=r"mocks\['Person'\]"):
        MockRegistry({"Person": {"name": "a"}})  # type: ignore[dict-item]
