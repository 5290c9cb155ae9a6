"""Fixtures for provider tests."""

import pytest

from combinatorial_runner.models.descriptor import Parameter, TestFunction
from combinatorial_runner.providers import ProviderContext


@pytest.fixture
def context() -> ProviderContext:
    """Context for a one-parameter function without an owner."""
    parameter = Parameter(name="value", position=0)
    return ProviderContext(
        function=TestFunction(name="test_value", parameters=[parameter]),
        parameter=parameter,
    )
