"""Cartesian product enumeration in odometer order."""

from collections.abc import Iterator, Sequence
from typing import Any

# Largest count representable as a signed 64-bit integer.
MAX_COMBINATIONS = 2**63 - 1


def count_combinations(value_lists: Sequence[Sequence[Any]]) -> int | None:
    """Multiply the list lengths, returning None if the product overflows."""
    total = 1
    for values in value_lists:
        total *= len(values)
        if total > MAX_COMBINATIONS:
            return None
    return total


class CombinationEnumerator:
    """Lazily yields every combination of one value per parameter.

    Indexes are advanced like a mixed-radix odometer: the last parameter
    varies fastest and the first slowest. Each iteration starts a fresh
    traversal, so one enumerator can be iterated any number of times.
    """

    def __init__(self, value_lists: Sequence[Sequence[Any]]):
        self._value_lists = list(value_lists)
        self.total = count_combinations(self._value_lists)

    def __len__(self) -> int:
        if self.total is None:
            raise OverflowError("Combination count does not fit in 64 bits")
        return self.total

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        lists = self._value_lists
        if any(not values for values in lists):
            return

        indexes = [0] * len(lists)
        while True:
            yield tuple(values[i] for values, i in zip(lists, indexes, strict=True))

            position = len(indexes) - 1
            while position >= 0:
                indexes[position] += 1
                if indexes[position] < len(lists[position]):
                    break
                indexes[position] = 0
                position -= 1

            if position < 0:
                return
