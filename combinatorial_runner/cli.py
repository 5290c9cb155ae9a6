"""CLI entry point running the combinatorial tests of Python modules."""

import argparse
import importlib
import inspect
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from combinatorial_runner.declarations import (
    describe_function,
    get_bindings,
    is_combinatorial,
)
from combinatorial_runner.executor import TestMethodExecutor
from combinatorial_runner.invocation import CallableInvoker
from combinatorial_runner.models.config import EngineConfig
from combinatorial_runner.models.outcome import FailureDetail, Outcome

log = logging.getLogger(__name__)

STATUS_SYMBOLS = {
    "success": "✓",
    "failure": "✗",
    "error": "!",
}


class TargetNotFoundError(Exception):
    """Raised when a target module cannot be loaded or has no tests."""


@dataclass(frozen=True, kw_only=True)
class FunctionResult:
    """Outcomes of one expanded test function."""

    test_name: str
    outcomes: Sequence[Outcome]


def discover_tests(module_name: str) -> Sequence[Any]:
    """Import a module and return its combinatorial test functions by name."""
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetNotFoundError(f"Cannot import target '{module_name}'") from exc

    functions = [
        func
        for _, func in inspect.getmembers(module, inspect.isfunction)
        if func.__module__ == module.__name__ and is_combinatorial(func)
    ]
    if not functions:
        raise TargetNotFoundError(
            f"Target '{module_name}' has no combinatorial test functions"
        )
    return functions


def run_tests(
    functions: Sequence[Any], config: EngineConfig
) -> Sequence[FunctionResult]:
    """Expand and run each test function in turn."""
    results: list[FunctionResult] = []
    for func in functions:
        try:
            descriptor = describe_function(func)
        except ValueError as exc:
            log.error("Cannot describe %s: %s", func.__qualname__, exc)
            error = Outcome(status="error", failure=FailureDetail.from_exception(exc))
            results.append(
                FunctionResult(
                    test_name=f"{func.__module__}.{func.__qualname__}",
                    outcomes=[error],
                )
            )
            continue

        executor = TestMethodExecutor(invoker=CallableInvoker(func), config=config)
        outcomes = executor.execute(descriptor, get_bindings(func))
        results.append(
            FunctionResult(test_name=descriptor.qualified_name, outcomes=outcomes)
        )
    return results


def log_results_summary(
    log: logging.Logger, function_results: Sequence[FunctionResult]
) -> None:
    """Log a formatted summary of test outcomes."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for function_result in function_results:
        for outcome in function_result.outcomes:
            symbol = STATUS_SYMBOLS.get(outcome.status, "?")
            log.info(
                "%s %s: %s (%.2fs)",
                symbol,
                outcome.display_name or function_result.test_name,
                outcome.status,
                outcome.duration,
            )
            if outcome.failure:
                log.info("  Failure: %s", outcome.failure)


def format_output(function_results: Sequence[FunctionResult]) -> dict[str, Any]:
    """Format outcomes for JSON output."""
    all_results: list[dict[str, Any]] = []
    for function_result in function_results:
        for outcome in function_result.outcomes:
            all_results.append(
                {
                    "test": function_result.test_name,
                    "name": outcome.display_name,
                    "status": outcome.status,
                    "duration": outcome.duration,
                    "message": str(outcome.failure) if outcome.failure else None,
                }
            )

    return {
        "total": len(all_results),
        "passed": sum(1 for r in all_results if r["status"] == "success"),
        "failed": sum(1 for r in all_results if r["status"] == "failure"),
        "errors": sum(1 for r in all_results if r["status"] == "error"),
        "results": all_results,
    }


def run(targets: Sequence[str], config: EngineConfig) -> int:
    """Run the combinatorial tests of every target and return exit code."""
    log = logging.getLogger("combinatorial_runner")

    functions = []
    for target in targets:
        log.info("Collecting tests from %s", target)
        functions.extend(discover_tests(target))

    log.info("Running %d test function(s)...", len(functions))
    function_results = run_tests(functions, config)

    log_results_summary(log, function_results)

    output = format_output(function_results)
    print(json.dumps(output, indent=2))

    return 0 if output["passed"] == output["total"] else 1


def parse_config(config_json: str) -> EngineConfig:
    """Validate a JSON object into the engine configuration."""
    config_dict: Mapping[str, Any] = json.loads(config_json) if config_json else {}
    return EngineConfig(**config_dict)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run combinatorial tests declared in Python modules"
    )
    parser.add_argument(
        "--target",
        action="append",
        required=True,
        help="Importable module containing combinatorial tests (repeatable)",
    )
    parser.add_argument(
        "--config",
        default="",
        help="JSON configuration for the engine",
    )

    args = parser.parse_args()
    config = parse_config(args.config)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(args.target, config))


if __name__ == "__main__":  # pragma: no cover
    main()
