"""Init command implementation.

Creates a starter list definition file.
"""

from pathlib import Path
from typing import Annotated

import typer

from listhub.core.definition import DefinitionError, save_definition
from listhub.core.paths import get_default_list_path
from listhub.core.taxonomy import slugify
from listhub.models.definition import ListDefinition, ListOptions, SourceDefinition
from listhub.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create a starter list definition.",
    invoke_without_command=True,
)


def _create_definition(list_id: str) -> ListDefinition:
    """Create a starter definition with one source of each built-in kind.

    Args:
        list_id: Identifier of the new list.

    Returns:
        New ListDefinition.
    """
    return ListDefinition(
        id=list_id,
        name=list_id.replace("-", " ").title(),
        sources=[
            SourceDefinition(
                type="markdown",
                data="README.md",
                options={"exclude": ["^https?://(www\\.)?example\\.com"]},
            ),
            SourceDefinition(
                type="inline",
                data=[{"id": "https://www.python.org", "title": "Python"}],
                options={"category": "Resources"},
            ),
        ],
        options=ListOptions(category_order={"resources": 100}),
    )


@app.callback(invoke_without_command=True)
def init_list(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the list definition.",
        ),
    ] = None,
    list_id: Annotated[
        str | None,
        typer.Option(
            "--id",
            help="List identifier (default: derived from the directory name).",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing definition.",
        ),
    ] = False,
) -> None:
    """Create a starter listhub.toml.

    Examples:
        listhub init                      # Create ./listhub.toml
        listhub init --output lists/a.toml
        listhub init --id awesome-tools --force
    """
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_default_list_path()

    if output_path.exists():
        if not force:
            print_error(f"List definition already exists: {output_path}")
            print_info("Use --force to overwrite or specify a different path with --output.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing list definition: {output_path}")

    new_id = list_id or slugify(output_path.resolve().parent.name) or "my-list"
    definition = _create_definition(new_id)

    try:
        saved_path = save_definition(definition, output_path)
    except DefinitionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"List definition created: {saved_path}")
