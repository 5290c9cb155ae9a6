"""Provider retrieving values from a static factory function."""

import inspect
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from combinatorial_runner.errors import FactoryResolutionError, FactoryResultError
from combinatorial_runner.providers.base import ProviderContext, ValueProvider

log = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _owner_name(owner: Any) -> str:
    return getattr(owner, "__qualname__", None) or getattr(
        owner, "__name__", repr(owner)
    )


@dataclass(frozen=True, kw_only=True)
class FactoryValues(ValueProvider):
    """Passes the values returned by a zero-argument factory function.

    The factory is looked up on ``owner`` (a class or module), or on the
    test function's owner when ``owner`` is not given. On a class it must
    be a ``staticmethod``. The factory runs at most once per provider; its
    result is cached for the lifetime of the instance.
    """

    factory_name: str
    owner: Any = None
    _cache: list[Sequence[Any]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.factory_name or not self.factory_name.strip():
            raise ValueError("Invalid factory function name")

    def get_values(self, context: ProviderContext) -> Sequence[Any]:
        """Return the factory's values, running it on first use only."""
        if not self._cache:
            self._cache.append(self._run_factory(context))
        return self._cache[0]

    def _run_factory(self, context: ProviderContext) -> Sequence[Any]:
        owner = self.owner if self.owner is not None else context.function.owner
        factory = self._resolve(owner, context.parameter.name)

        log.debug(
            "Running factory %s.%s for parameter %s",
            _owner_name(owner),
            self.factory_name,
            context.parameter.name,
        )
        values = factory()

        if values is None:
            raise FactoryResultError(
                f"The factory function {self.factory_name} returned a null collection.",
                parameter=context.parameter.name,
            )
        if isinstance(values, str | bytes) or not isinstance(values, Iterable):
            raise FactoryResultError(
                f"The factory function {self.factory_name} returned "
                f"{type(values).__name__}, which is not a collection of values.",
                parameter=context.parameter.name,
            )
        return tuple(values)

    def _resolve(self, owner: Any, parameter: str) -> Callable[[], Any]:
        if owner is None:
            raise FactoryResolutionError(
                f"Cannot resolve factory function {self.factory_name}: "
                "no owning class or module is known.",
                parameter=parameter,
            )

        try:
            attribute = inspect.getattr_static(owner, self.factory_name)
        except AttributeError:
            raise FactoryResolutionError(
                f"The factory function {self.factory_name} does not exist on "
                f"{_owner_name(owner)}.",
                parameter=parameter,
            ) from None

        if inspect.isclass(owner):
            if not isinstance(attribute, staticmethod):
                raise FactoryResolutionError(
                    f"The factory function {self.factory_name} must be static.",
                    parameter=parameter,
                )
            attribute = attribute.__func__

        if not callable(attribute) or self._requires_arguments(attribute):
            raise FactoryResolutionError(
                f"The factory function {self.factory_name} does not have the "
                "expected signature. Factory functions must take 0 parameters "
                "and return an iterable collection.",
                parameter=parameter,
            )
        return attribute

    @staticmethod
    def _requires_arguments(func: Callable[..., Any]) -> bool:
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            return False
        return any(
            p.default is inspect.Parameter.empty and p.kind not in _VARIADIC
            for p in signature.parameters.values()
        )
