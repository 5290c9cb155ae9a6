"""Display names for individual combinations."""

from collections.abc import Sequence
from enum import Enum
from typing import Any


def digit_width(total_count: int | None) -> int:
    """Number of decimal digits needed to print ``total_count``.

    Never less than 1; an unknown (overflowed) count also gives 1.
    """
    if total_count is None or total_count <= 1:
        return 1
    return len(str(total_count))


def render_value(value: Any) -> str:
    """Render an argument value for a display name.

    Text is quoted verbatim, without escaping embedded quotes.
    """
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_display_name(
    test_name: str,
    sequence_number: int,
    total_count: int | None,
    arguments: Sequence[Any],
) -> str:
    """Build the display name of one combination.

    The 1-based sequence number is zero-padded to the width of the total
    count so that names sort in execution order.

    Example:
        >>> format_display_name("test_add", 7, 12, [1, "x"])
        '#07: test_add(1, "x")'

    """
    number = str(sequence_number).rjust(digit_width(total_count), "0")
    rendered = ", ".join(render_value(value) for value in arguments)
    return f"#{number}: {test_name}({rendered})"
