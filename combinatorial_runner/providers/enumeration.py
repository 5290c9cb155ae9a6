"""Provider passing every member of an enumeration."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from combinatorial_runner.errors import NotAnEnumerationError
from combinatorial_runner.providers.base import ProviderContext, ValueProvider


@dataclass(frozen=True, kw_only=True)
class EnumValues(ValueProvider):
    """Passes all members of ``enum_type`` in declaration order.

    Aliases are skipped, as with iteration over the enum class.
    """

    enum_type: Any

    def get_values(self, context: ProviderContext) -> Sequence[Any]:
        """Return the enumeration's members."""
        if not (isinstance(self.enum_type, type) and issubclass(self.enum_type, Enum)):
            raise NotAnEnumerationError(
                f"Type {self.enum_type!r} given for parameter "
                f"{context.parameter.name} is not an enumeration.",
                parameter=context.parameter.name,
            )
        return tuple(self.enum_type)
