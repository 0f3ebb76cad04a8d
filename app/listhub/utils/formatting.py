"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from listhub.core.theme import get_theme

if TYPE_CHECKING:
    from listhub.models.category import Category


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_category_table(title: str = "Categories") -> Table:
    """Create a pre-configured table for displaying categories.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for category display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("ID", style="muted", justify="right")
    table.add_column("Category", no_wrap=True)
    table.add_column("Path", style="muted")
    table.add_column("Entries", style="count", justify="right")
    table.add_column("Order", style="muted", justify="right")
    return table


def format_category_row(category: Category) -> tuple[str, str, str, str, str]:
    """Format a category as a table row, indented by depth.

    Args:
        category: The category to format.

    Returns:
        Tuple of (id, title, path, entries, order) with Rich markup.
    """
    indent = "  " * category.depth
    style = "category" if category.depth == 0 else "category_nested"
    title = f"{indent}[{style}]{escape(category.title)}[/]"
    return (
        str(category.id),
        title,
        category.path,
        str(category.total),
        str(category.order),
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
