"""Invocation of the test body for one combination."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from combinatorial_runner.models.outcome import FailureDetail


@dataclass(frozen=True, kw_only=True)
class InvocationResult:
    """Pass/fail result reported by an invoker."""

    passed: bool
    failure: FailureDetail | None = None


class Invoker(ABC):
    """Capability supplied by the host to run the test body."""

    @abstractmethod
    def invoke(self, arguments: Sequence[Any]) -> InvocationResult:
        """Run the test body once with ``arguments`` in parameter order."""


@dataclass(frozen=True)
class CallableInvoker(Invoker):
    """Invokes a plain Python callable.

    A normal return is a pass. Assertion errors, and any other exception
    raised by the body, are reported as failures.
    """

    func: Callable[..., Any]

    def invoke(self, arguments: Sequence[Any]) -> InvocationResult:
        """Call the function with the combination's arguments."""
        try:
            self.func(*arguments)
        except Exception as exc:
            return InvocationResult(
                passed=False, failure=FailureDetail.from_exception(exc)
            )
        return InvocationResult(passed=True)
