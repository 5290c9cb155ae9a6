"""Allow running the CLI with ``python -m combinatorial_runner``."""

from combinatorial_runner.cli import main

main()
