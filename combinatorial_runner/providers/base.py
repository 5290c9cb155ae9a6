"""Abstract base class for parameter value providers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from combinatorial_runner.models.descriptor import Parameter, TestFunction


@dataclass(frozen=True, kw_only=True)
class ProviderContext:
    """What a provider is resolving values for."""

    function: TestFunction
    parameter: Parameter


@dataclass(frozen=True, kw_only=True)
class ValueProvider(ABC):
    """Abstract base for the value set of one test parameter.

    New kinds of provider (ranges, random samples, ...) only need to
    implement ``get_values``; nothing else in the engine changes.
    """

    @abstractmethod
    def get_values(self, context: ProviderContext) -> Sequence[Any]:
        """Produce the candidate values for a parameter.

        Args:
            context: The test function and parameter being resolved

        Returns:
            Ordered, finite sequence of values to pass for the parameter

        Raises:
            ConfigurationError: If the provider cannot produce values

        """
