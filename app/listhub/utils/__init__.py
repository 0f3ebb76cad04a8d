"""Utility modules for listhub.

This module exports commonly used utility functions.
"""

from listhub.utils.formatting import (
    console,
    create_category_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from listhub.utils.progress import NullProgress, ProgressIndicator, RichProgress
from listhub.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "NullProgress",
    "ProgressIndicator",
    "RichProgress",
    "command_exists",
    "console",
    "create_category_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
