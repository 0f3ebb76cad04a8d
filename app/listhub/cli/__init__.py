"""CLI package for listhub.

This package contains the Typer application and all subcommands.
"""

from listhub.cli.main import app

__all__ = ["app"]
