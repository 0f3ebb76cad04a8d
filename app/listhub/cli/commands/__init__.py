"""CLI commands for listhub.

This package contains all subcommand implementations.
"""

from listhub.cli.commands import build, init, validate

__all__ = ["build", "init", "validate"]
