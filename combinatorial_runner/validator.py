"""Validation of argument bindings and candidate values."""

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Any

from combinatorial_runner.errors import (
    BindingCountError,
    DuplicateBindingError,
    EmptyValuesError,
    MissingBindingError,
    TypeMismatchError,
    UnorderedValuesError,
    UnresolvedBindingError,
)
from combinatorial_runner.models.binding import ArgumentBinding
from combinatorial_runner.models.descriptor import Parameter
from combinatorial_runner.naming import render_value

log = logging.getLogger(__name__)

TypeCompatibility = Callable[[Any, Parameter], bool]

_UNCONSTRAINED = (None, Any, inspect.Parameter.empty)

# Implicit numeric promotions accepted by type checkers.
_NUMERIC_TOWER: dict[Any, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def is_assignable(value: Any, parameter: Parameter) -> bool:
    """Default compatibility check, based on ``isinstance``.

    Integers are accepted for ``float`` and ``complex``, floats for
    ``complex``. Declared types that cannot be checked at runtime, such as
    parametrised generics, accept any value.
    """
    declared = parameter.declared_type
    if any(declared is unconstrained for unconstrained in _UNCONSTRAINED):
        return True
    try:
        if isinstance(value, declared):
            return True
    except TypeError:
        return True
    return isinstance(value, _NUMERIC_TOWER.get(declared, ()))


def _resolve_position(
    parameters: Sequence[Parameter], binding: ArgumentBinding
) -> int | None:
    if binding.index is not None:
        if 0 <= binding.index < len(parameters):
            return binding.index
        return None

    matches = [p.position for p in parameters if p.name == binding.name]
    return matches[0] if len(matches) == 1 else None


def validate_bindings(
    parameters: Sequence[Parameter], bindings: Sequence[ArgumentBinding]
) -> Sequence[ArgumentBinding]:
    """Check bindings cover every parameter exactly once.

    Args:
        parameters: Parameters of the test function, in position order
        bindings: Bindings declared for the function, in any order

    Returns:
        The bindings reordered into parameter position order

    Raises:
        BindingCountError: If there are more bindings than parameters
        UnresolvedBindingError: If a binding's index or name matches no parameter
        DuplicateBindingError: If two bindings target the same parameter
        MissingBindingError: If a parameter has no binding, which is how
            fewer bindings than parameters are reported

    """
    if len(bindings) > len(parameters):
        raise BindingCountError(
            f"Expected {len(parameters)} argument binding(s), "
            f"found {len(bindings)}."
        )

    by_position: dict[int, ArgumentBinding] = {}
    for binding in bindings:
        position = _resolve_position(parameters, binding)
        if position is None:
            raise UnresolvedBindingError(
                f"Argument binding {binding.target} does not match any parameter."
            )

        name = parameters[position].name
        if position in by_position:
            raise DuplicateBindingError(
                f"Parameter {name} is bound more than once.", parameter=name
            )
        by_position[position] = binding

    for parameter in parameters:
        if parameter.position not in by_position:
            raise MissingBindingError(
                f"Parameter {parameter.name} is missing an argument binding.",
                parameter=parameter.name,
            )

    return [by_position[p.position] for p in parameters]


def check_ordered(
    parameters: Sequence[Parameter], value_lists: Sequence[Any]
) -> None:
    """Reject value collections that cannot be indexed in a stable order."""
    for parameter, values in zip(parameters, value_lists, strict=True):
        if not isinstance(values, Sequence) or isinstance(values, str | bytes):
            raise UnorderedValuesError(
                f"Values for parameter {parameter.name} must be an ordered "
                f"sequence, got {type(values).__name__}.",
                parameter=parameter.name,
            )


def check_non_empty(
    parameters: Sequence[Parameter], value_lists: Sequence[Sequence[Any]]
) -> None:
    """Reject any parameter whose provider produced no values."""
    for parameter, values in zip(parameters, value_lists, strict=True):
        if not values:
            raise EmptyValuesError(
                f"No values were provided for parameter {parameter.name}.",
                parameter=parameter.name,
            )


def check_value_types(
    parameters: Sequence[Parameter],
    value_lists: Sequence[Sequence[Any]],
    is_compatible: TypeCompatibility = is_assignable,
) -> None:
    """Check every candidate value against its parameter's declared type.

    ``None`` is always accepted. The first incompatible value, scanning
    parameters in position order, is reported.

    Raises:
        TypeMismatchError: If a value is incompatible with its parameter

    """
    for parameter, values in zip(parameters, value_lists, strict=True):
        for value in values:
            if value is None or is_compatible(value, parameter):
                continue
            raise TypeMismatchError(
                f"Argument value ({render_value(value)}) has a type that is "
                f"incompatible with parameter {parameter.name}.",
                parameter=parameter.name,
            )
    log.debug("All values are compatible with %d parameter(s)", len(parameters))
