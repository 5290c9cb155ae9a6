"""Tests for the decorator host adapter."""

import sys
from enum import Enum

import pytest

from combinatorial_runner.declarations import (
    BINDINGS_ATTRIBUTE,
    describe_function,
    enum_values,
    factory_values,
    get_bindings,
    is_combinatorial,
    values,
)
from combinatorial_runner.executor import TestMethodExecutor
from combinatorial_runner.invocation import CallableInvoker
from combinatorial_runner.models.descriptor import Parameter
from combinatorial_runner.providers import EnumValues, FactoryValues, LiteralValues


class Suit(Enum):
    """Card suits."""

    HEARTS = "h"
    SPADES = "s"


def ranks() -> list[int]:
    """Module-level factory."""
    return [1, 13]


class Deck:
    """Class owning a factory and a test method."""

    @staticmethod
    def jokers() -> list[str]:
        return ["red", "black"]

    @factory_values(0, "jokers")
    def test_joker(self, joker: str) -> None:
        assert joker in ("red", "black")


@values("label", "a", "b")
@enum_values(1, Suit)
@factory_values("rank", "ranks")
def card_check(label: str, suit: Suit, rank: int) -> None:
    """Decorated sample test."""


def test_records_bindings_in_source_order() -> None:
    """Bindings are listed top-most decorator first."""
    bindings = get_bindings(card_check)

    assert [(b.name, b.index) for b in bindings] == [
        ("label", None),
        (None, 1),
        ("rank", None),
    ]
    assert isinstance(bindings[0].provider, LiteralValues)
    assert isinstance(bindings[1].provider, EnumValues)
    assert isinstance(bindings[2].provider, FactoryValues)


def test_is_combinatorial() -> None:
    """Detects functions with recorded bindings."""

    def plain() -> None:  # pragma: no cover
        pass

    assert is_combinatorial(card_check)
    assert not is_combinatorial(plain)
    assert get_bindings(plain) == ()


def test_values_requires_at_least_one_item() -> None:
    """Raises at decoration time for an empty value list."""
    with pytest.raises(ValueError, match="at least one value"):
        values("x")


@pytest.mark.parametrize("target", [True, 1.5, None])
def test_rejects_invalid_target(target: object) -> None:
    """Raises for targets that are neither names nor indexes."""
    with pytest.raises(TypeError, match="parameter name or index"):
        values(target, 1)  # type: ignore[arg-type]


def test_describe_function() -> None:
    """Builds parameters from the signature and type hints."""
    descriptor = describe_function(card_check)

    assert descriptor.name == "card_check"
    assert descriptor.owner is sys.modules[card_check.__module__]
    assert list(descriptor.parameters) == [
        Parameter(name="label", position=0, declared_type=str),
        Parameter(name="suit", position=1, declared_type=Suit),
        Parameter(name="rank", position=2, declared_type=int),
    ]


def test_describe_function_without_annotations() -> None:
    """Unannotated parameters are unconstrained."""

    def untyped(a, b):  # type: ignore[no-untyped-def]  # pragma: no cover
        pass

    descriptor = describe_function(untyped)

    assert [p.declared_type for p in descriptor.parameters] == [None, None]


def test_describe_bound_method() -> None:
    """Skips self and uses the instance's class as owner."""
    descriptor = describe_function(Deck().test_joker)

    assert descriptor.owner is Deck
    assert [p.name for p in descriptor.parameters] == ["joker"]
    assert descriptor.qualified_name == "Deck.test_joker"


@pytest.mark.parametrize("signature", ["keyword", "variadic"])
def test_describe_rejects_non_positional(signature: str) -> None:
    """Raises for keyword-only and variadic parameters."""

    def keyword(*, a: int) -> None:  # pragma: no cover
        pass

    def variadic(*args: int) -> None:  # pragma: no cover
        pass

    func = keyword if signature == "keyword" else variadic

    with pytest.raises(ValueError, match="must be positional"):
        describe_function(func)


def test_runs_decorated_function_end_to_end() -> None:
    """Executes every combination of a decorated module-level function."""
    outcomes = TestMethodExecutor(invoker=CallableInvoker(card_check)).execute(
        describe_function(card_check), get_bindings(card_check)
    )

    assert len(outcomes) == 8
    assert all(o.passed for o in outcomes)
    assert outcomes[0].display_name == '#1: card_check("a", Suit.HEARTS, 1)'
    assert outcomes[7].display_name == '#8: card_check("b", Suit.SPADES, 13)'


def test_runs_bound_method_end_to_end() -> None:
    """Resolves the factory on the method's class."""
    method = Deck().test_joker

    outcomes = TestMethodExecutor(invoker=CallableInvoker(method)).execute(
        describe_function(method), get_bindings(method)
    )

    assert [o.display_name for o in outcomes] == [
        '#1: test_joker("red")',
        '#2: test_joker("black")',
    ]


def test_attribute_name() -> None:
    """Bindings are stored under a dunder attribute."""
    assert getattr(card_check, BINDINGS_ATTRIBUTE) == get_bindings(card_check)
