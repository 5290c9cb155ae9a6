"""Expansion and execution of a combinatorial test function."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from combinatorial_runner.enumerator import CombinationEnumerator
from combinatorial_runner.invocation import Invoker
from combinatorial_runner.models.binding import ArgumentBinding
from combinatorial_runner.models.config import EngineConfig
from combinatorial_runner.models.descriptor import TestFunction
from combinatorial_runner.models.outcome import FailureDetail, Outcome
from combinatorial_runner.naming import format_display_name
from combinatorial_runner.providers.base import ProviderContext
from combinatorial_runner.validator import (
    TypeCompatibility,
    check_non_empty,
    check_ordered,
    check_value_types,
    is_assignable,
    validate_bindings,
)

log = logging.getLogger(__name__)


class ExpansionState(Enum):
    """Stages of one expansion."""

    VALIDATING = "validating"
    ENUMERATING = "enumerating"
    INVOKING = "invoking"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True, kw_only=True)
class TestMethodExecutor:
    """Runs a test function once per combination of its parameter values."""

    __test__ = False

    invoker: Invoker
    config: EngineConfig = field(default_factory=EngineConfig)
    is_compatible: TypeCompatibility = is_assignable

    def execute(
        self, function: TestFunction, bindings: Sequence[ArgumentBinding]
    ) -> list[Outcome]:
        """Expand and run a test function.

        Args:
            function: Descriptor of the test function
            bindings: Value provider bindings declared for its parameters

        Returns:
            One outcome per combination in enumeration order, or a single
            error outcome if the bindings or values are unusable

        """
        name = function.qualified_name
        state = ExpansionState.VALIDATING
        try:
            log.debug("%s: %s", name, state.value)
            ordered = validate_bindings(function.parameters, bindings)

            state = ExpansionState.ENUMERATING
            log.debug("%s: %s", name, state.value)
            enumerator = self._prepare(function, ordered)
        except Exception as exc:
            log.error(
                "Expansion of %s aborted while %s: %s",
                name,
                state.value,
                exc,
                exc_info=exc,
            )
            log.debug("%s: %s", name, ExpansionState.ABORTED.value)
            return [
                Outcome(status="error", failure=FailureDetail.from_exception(exc))
            ]

        log.debug("%s: %s", name, ExpansionState.INVOKING.value)
        log.info(
            "Running %s with %s combination(s)",
            name,
            "unknown" if enumerator.total is None else enumerator.total,
        )
        outcomes = [
            self._invoke(function, number, enumerator.total, arguments)
            for number, arguments in enumerate(enumerator, start=1)
        ]

        log.debug("%s: %s", name, ExpansionState.DONE.value)
        log.info(
            "Finished %s: %d passed, %d failed",
            name,
            sum(1 for o in outcomes if o.passed),
            sum(1 for o in outcomes if not o.passed),
        )
        return outcomes

    def _prepare(
        self, function: TestFunction, ordered: Sequence[ArgumentBinding]
    ) -> CombinationEnumerator:
        """Materialize every parameter's values and check them."""
        value_lists = [
            binding.provider.get_values(
                ProviderContext(function=function, parameter=parameter)
            )
            for parameter, binding in zip(function.parameters, ordered, strict=True)
        ]

        check_ordered(function.parameters, value_lists)
        check_non_empty(function.parameters, value_lists)
        if self.config.check_types:
            check_value_types(function.parameters, value_lists, self.is_compatible)

        enumerator = CombinationEnumerator(value_lists)
        if enumerator.total is None:
            log.warning(
                "Combination count of %s overflows; display names are not padded",
                function.qualified_name,
            )
        return enumerator

    def _invoke(
        self,
        function: TestFunction,
        number: int,
        total: int | None,
        arguments: Sequence[Any],
    ) -> Outcome:
        """Run one combination, capturing any failure of the test body."""
        display_name = format_display_name(function.name, number, total, arguments)
        started = time.perf_counter()
        try:
            result = self.invoker.invoke(arguments)
        except Exception as exc:
            log.debug("%s raised", display_name, exc_info=exc)
            return Outcome(
                status="failure",
                display_name=display_name,
                duration=time.perf_counter() - started,
                failure=FailureDetail.from_exception(exc),
            )

        duration = time.perf_counter() - started
        log.debug("%s: %s", display_name, "passed" if result.passed else "failed")
        return Outcome(
            status="success" if result.passed else "failure",
            display_name=display_name,
            duration=duration,
            failure=result.failure,
        )
