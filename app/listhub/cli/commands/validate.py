"""Validate command implementation.

Checks a list definition file against the schema without building it.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from listhub.core.definition import DefinitionError, load_definition
from listhub.core.paths import get_default_list_path
from listhub.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Validate a list definition.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def validate_list(
    ctx: typer.Context,
    list_path: Annotated[
        Path | None,
        typer.Option(
            "--list",
            "-l",
            help="Path to the list definition (default: ./listhub.toml).",
        ),
    ] = None,
    show_sources: Annotated[
        bool,
        typer.Option(
            "--sources",
            "-s",
            help="List the sources of the definition.",
        ),
    ] = False,
) -> None:
    """Validate a list definition file.

    Examples:
        listhub validate                      # Validate ./listhub.toml
        listhub validate --list my-list.json  # Validate another file
        listhub validate --sources            # Also show the sources
    """
    if ctx.invoked_subcommand is not None:
        return

    path = list_path or get_default_list_path()
    try:
        definition = load_definition(path)
    except DefinitionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if show_sources:
        table = Table(
            title=f"Sources of {definition.id}",
            show_header=True,
            header_style="bold_header",
            border_style="border",
        )
        table.add_column("#", style="muted", justify="right")
        table.add_column("Type")
        table.add_column("Data", style="muted", overflow="ellipsis")
        table.add_column("Options", style="muted")
        for index, source in enumerate(definition.sources):
            data = source.data if isinstance(source.data, str) else type(source.data).__name__
            table.add_row(str(index), source.type, str(data), ", ".join(sorted(source.options)))
        console.print(table)

    print_success(f"List '{definition.id}' is valid: {len(definition.sources)} source(s)")
