"""Engine configuration."""

from typing import Literal

from pydantic import Field

from combinatorial_runner.models.base import Model


class EngineConfig(Model):
    """Settings controlling how expansions are validated and reported."""

    check_types: bool = Field(
        default=True,
        description="Check every candidate value against its parameter type",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level used by the command-line host"
    )
