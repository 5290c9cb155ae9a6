"""Models for expansion results."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class FailureDetail:
    """Classification and message of a failure, with its nested cause."""

    kind: str
    message: str
    cause: "FailureDetail | None" = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureDetail":
        """Build a detail chain from an exception and its causes."""
        nested = exc.__cause__ or (
            None if exc.__suppress_context__ else exc.__context__
        )
        return cls(
            kind=type(exc).__name__,
            message=str(exc),
            cause=cls.from_exception(nested) if nested is not None else None,
        )

    def __str__(self) -> str:
        text = f"{self.kind}: {self.message}" if self.message else self.kind
        if self.cause is not None:
            text += f" (caused by {self.cause})"
        return text


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """Result of one invocation, or of a whole-method configuration failure.

    Configuration failures never reach a combination, so they carry no
    display name.
    """

    status: Literal["success", "failure", "error"]
    display_name: str | None = None
    duration: float = 0.0
    failure: FailureDetail | None = None

    @property
    def passed(self) -> bool:
        """Whether the invocation succeeded."""
        return self.status == "success"
