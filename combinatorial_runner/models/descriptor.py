"""Descriptors of the test function being expanded."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class Parameter:
    """One declared parameter of a test function.

    ``declared_type`` is whatever type tag the host extracted for the
    parameter; ``None`` means the parameter is unconstrained.
    """

    name: str
    position: int
    declared_type: Any = None


@dataclass(frozen=True, kw_only=True)
class TestFunction:
    """Host-supplied description of a test function."""

    __test__ = False

    name: str
    parameters: Sequence[Parameter] = ()
    owner: Any = field(default=None, repr=False)

    @property
    def qualified_name(self) -> str:
        """Name prefixed with the owner's name, when there is one."""
        owner_name = getattr(self.owner, "__qualname__", None) or getattr(
            self.owner, "__name__", None
        )
        return f"{owner_name}.{self.name}" if owner_name else self.name
