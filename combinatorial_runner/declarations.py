"""Decorators declaring the values a test function is run with.

Example::

    @values("size", 1, 10, 100)
    @enum_values("color", Color)
    @factory_values("shape", "all_shapes")
    def test_paint(size: int, color: Color, shape: Shape) -> None:
        ...

The engine never looks at these attributes itself; ``describe_function``
and ``get_bindings`` turn them into the descriptors the executor consumes.
"""

import inspect
import sys
import typing
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from combinatorial_runner.models.binding import ArgumentBinding
from combinatorial_runner.models.descriptor import Parameter, TestFunction
from combinatorial_runner.providers import (
    EnumValues,
    FactoryValues,
    LiteralValues,
    ValueProvider,
)

F = TypeVar("F", bound=Callable[..., Any])

BINDINGS_ATTRIBUTE = "__combinatorial_bindings__"

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _binding(target: int | str, provider: ValueProvider) -> ArgumentBinding:
    # bool is an int subclass, but True is never meant as a position
    if isinstance(target, bool) or not isinstance(target, int | str):
        raise TypeError(
            f"Binding target must be a parameter name or index, got {target!r}"
        )
    if isinstance(target, int):
        return ArgumentBinding.for_index(target, provider)
    return ArgumentBinding.for_name(target, provider)


def _bind(
    target: int | str, provider: ValueProvider
) -> Callable[[F], F]:
    binding = _binding(target, provider)

    def decorator(func: F) -> F:
        # Decorators apply bottom-up, so prepend to keep source order.
        existing = getattr(func, BINDINGS_ATTRIBUTE, ())
        setattr(func, BINDINGS_ATTRIBUTE, (binding, *existing))
        return func

    return decorator


def values(
    target: int | str, *items: Any
) -> Callable[[F], F]:
    """Run the test with each of ``items`` for the target parameter."""
    return _bind(target, LiteralValues(values=items))


def enum_values(
    target: int | str, enum_type: Any
) -> Callable[[F], F]:
    """Run the test with every member of ``enum_type``."""
    return _bind(target, EnumValues(enum_type=enum_type))


def factory_values(
    target: int | str, factory_name: str, owner: Any = None
) -> Callable[[F], F]:
    """Run the test with the values returned by a factory function.

    Args:
        target: Parameter name or index
        factory_name: Name of a zero-argument function returning the values
        owner: Class or module declaring the factory; defaults to the
            test function's owner

    """
    return _bind(target, FactoryValues(factory_name=factory_name, owner=owner))


def get_bindings(func: Callable[..., Any]) -> Sequence[ArgumentBinding]:
    """Return the bindings declared on ``func``."""
    return tuple(getattr(func, BINDINGS_ATTRIBUTE, ()))


def is_combinatorial(func: Any) -> bool:
    """Check whether any value bindings were declared on ``func``."""
    return bool(getattr(func, BINDINGS_ATTRIBUTE, ()))


def describe_function(func: Callable[..., Any], owner: Any = None) -> TestFunction:
    """Build the descriptor of a Python test function.

    Args:
        func: The test function, or a bound method
        owner: Class or module declaring the function; defaults to the
            bound instance's class or the function's module

    Returns:
        Descriptor with one parameter per positional argument

    Raises:
        ValueError: If the function takes keyword-only or variadic arguments

    """
    if owner is None:
        bound_to = getattr(func, "__self__", None)
        if bound_to is not None:
            owner = bound_to if inspect.isclass(bound_to) else type(bound_to)
        else:
            owner = sys.modules.get(func.__module__)

    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        hints = {}

    parameters: list[Parameter] = []
    for position, param in enumerate(inspect.signature(func).parameters.values()):
        if param.kind not in _POSITIONAL:
            raise ValueError(
                f"Parameter {param.name} of {func.__qualname__} must be positional"
            )
        declared = hints.get(param.name, param.annotation)
        parameters.append(
            Parameter(
                name=param.name,
                position=position,
                declared_type=None if declared is inspect.Parameter.empty else declared,
            )
        )

    return TestFunction(name=func.__name__, parameters=parameters, owner=owner)
