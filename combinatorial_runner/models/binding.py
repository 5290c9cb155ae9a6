"""Association of a value provider with one test function parameter."""

from dataclasses import dataclass

from combinatorial_runner.providers.base import ValueProvider


@dataclass(frozen=True, kw_only=True)
class ArgumentBinding:
    """Binds a value provider to a parameter by position or by name.

    Exactly one of ``index`` and ``name`` is set.
    """

    provider: ValueProvider
    index: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.index is None) == (self.name is None):
            raise ValueError("Exactly one of index or name must be given")
        if self.name is not None and not self.name:
            raise ValueError("Parameter name must not be empty")

    @classmethod
    def for_index(cls, index: int, provider: ValueProvider) -> "ArgumentBinding":
        """Bind ``provider`` to the parameter at ``index``."""
        return cls(provider=provider, index=index)

    @classmethod
    def for_name(cls, name: str, provider: ValueProvider) -> "ArgumentBinding":
        """Bind ``provider`` to the parameter called ``name``."""
        return cls(provider=provider, name=name)

    @property
    def target(self) -> str:
        """Human-readable reference to the bound parameter."""
        if self.name is not None:
            return f"'{self.name}'"
        return f"#{self.index}"
