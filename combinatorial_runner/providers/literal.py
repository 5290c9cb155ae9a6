"""Provider for a fixed list of values."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from combinatorial_runner.providers.base import ProviderContext, ValueProvider


@dataclass(frozen=True, kw_only=True)
class LiteralValues(ValueProvider):
    """Passes a fixed, non-empty list of values."""

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("Expected at least one value")

    @classmethod
    def of(cls, *values: Any) -> "LiteralValues":
        """Create a provider from positional values."""
        return cls(values=values)

    def get_values(self, context: ProviderContext) -> Sequence[Any]:
        """Return the values given at construction."""
        return self.values
