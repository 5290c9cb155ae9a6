"""Value providers for combinatorial test parameters."""

from combinatorial_runner.providers.base import ProviderContext, ValueProvider
from combinatorial_runner.providers.enumeration import EnumValues
from combinatorial_runner.providers.factory import FactoryValues
from combinatorial_runner.providers.literal import LiteralValues

__all__ = [
    "EnumValues",
    "FactoryValues",
    "LiteralValues",
    "ProviderContext",
    "ValueProvider",
]
