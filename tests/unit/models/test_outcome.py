"""Tests for outcome models."""

from combinatorial_runner.models.outcome import FailureDetail
from combinatorial_runner.testing.factories import OutcomeFactory


def test_passed_reflects_status() -> None:
    """Only successful outcomes count as passed."""
    assert OutcomeFactory.build(status="success").passed
    assert not OutcomeFactory.build(status="failure").passed
    assert not OutcomeFactory.build(status="error").passed


def test_detail_from_exception() -> None:
    """Records the exception class name and message."""
    detail = FailureDetail.from_exception(ValueError("bad value"))

    assert detail == FailureDetail(kind="ValueError", message="bad value")


def test_detail_follows_explicit_cause() -> None:
    """Nests the exception's __cause__."""
    try:
        try:
            raise KeyError("inner")
        except KeyError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as exc:
        detail = FailureDetail.from_exception(exc)

    assert detail.kind == "RuntimeError"
    assert detail.cause is not None
    assert detail.cause.kind == "KeyError"
    assert detail.cause.cause is None


def test_detail_follows_implicit_context() -> None:
    """Nests the exception being handled when another was raised."""
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise RuntimeError("outer")  # noqa: B904
    except RuntimeError as exc:
        detail = FailureDetail.from_exception(exc)

    assert detail.cause is not None
    assert detail.cause.kind == "KeyError"


def test_detail_ignores_suppressed_context() -> None:
    """Does not nest a context suppressed with 'from None'."""
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise RuntimeError("outer") from None
    except RuntimeError as exc:
        detail = FailureDetail.from_exception(exc)

    assert detail.cause is None


def test_detail_str() -> None:
    """Renders the chain as text."""
    detail = FailureDetail(
        kind="RuntimeError",
        message="outer",
        cause=FailureDetail(kind="AssertionError", message=""),
    )

    assert str(detail) == "RuntimeError: outer (caused by AssertionError)"
