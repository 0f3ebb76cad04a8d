"""Build command implementation.

Processes a list definition into categorized entries and resolves them.
"""

import json
from datetime import timedelta
from pathlib import Path
from typing import Annotated

import typer

from listhub.cli.types import OutputFormat, get_processors, get_resolvers
from listhub.core.definition import DefinitionError, DefinitionNotFoundError, load_definition
from listhub.core.entry_list import EntryList, ResolveStats
from listhub.core.errors import ListConfigurationError
from listhub.core.paths import get_default_list_path
from listhub.models.result import ListResult
from listhub.utils.formatting import (
    console,
    create_category_table,
    err_console,
    format_category_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from listhub.utils.progress import NullProgress, ProgressIndicator, RichProgress

app = typer.Typer(
    help="Build a categorized list from a list definition.",
    invoke_without_command=True,
)


def _get_progress(quiet: bool) -> ProgressIndicator:
    """Use a spinner only when stderr is an interactive terminal."""
    if quiet or not err_console.is_terminal:
        return NullProgress()
    return RichProgress(err_console)


def _write_result(result: ListResult, export_path: Path) -> None:
    """Write the result as JSON.

    Raises:
        typer.Exit: If the file cannot be written.
    """
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Output path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(result.to_dict(), indent=2, default=str))
    except OSError as e:
        print_error(f"Failed to write output: {e}")
        raise typer.Exit(code=1) from e
    print_info(f"List written to {export_path}")


def _show_categories(entry_list: EntryList) -> None:
    """Print the category tree as a table, parents before children."""
    title = entry_list.definition.name or entry_list.id
    table = create_category_table(f"Categories of {title}")
    for category in sorted(entry_list.categories.values(), key=lambda c: c.path):
        table.add_row(*format_category_row(category))
    console.print(table)


@app.callback(invoke_without_command=True)
def build_list(
    ctx: typer.Context,
    list_path: Annotated[
        Path | None,
        typer.Option(
            "--list",
            "-l",
            help="Path to the list definition (default: ./listhub.toml).",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the built list to a JSON file.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    no_resolve: Annotated[
        bool,
        typer.Option(
            "--no-resolve",
            help="Only process sources, skip entry resolution.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Ignore cached resolutions.",
        ),
    ] = False,
    cache_dir: Annotated[
        Path | None,
        typer.Option(
            "--cache-dir",
            help="Resolver cache directory (default: ~/.cache/listhub).",
        ),
    ] = None,
    max_age: Annotated[
        int,
        typer.Option(
            "--max-age",
            help="Maximum age of cached resolutions in hours.",
            min=0,
        ),
    ] = 24,
    clear_cache: Annotated[
        bool,
        typer.Option(
            "--clear-cache",
            help="Delete cached resolutions before resolving.",
        ),
    ] = False,
) -> None:
    """Process and resolve a list definition.

    Sources are expanded into entries, entries are merged and organized
    into categories, then every entry is resolved.

    Examples:
        listhub build                          # Build ./listhub.toml
        listhub build --list lists/python.toml # Build another list
        listhub build --no-resolve             # Skip resolution
        listhub build --clear-cache            # Start with an empty cache
        listhub build --format json            # Print the list as JSON
        listhub build --output dist/list.json  # Export to a JSON file
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    path = (list_path or get_default_list_path()).resolve()

    try:
        definition = load_definition(path)
    except DefinitionNotFoundError as e:
        print_error(str(e))
        print_info("Run 'listhub init' to create a starter list definition.")
        raise typer.Exit(code=1) from e
    except DefinitionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    entry_list = EntryList(definition, progress=_get_progress(quiet))
    stats: ResolveStats | None = None

    try:
        entry_list.process(get_processors(base_dir=path.parent))

        if not no_resolve and entry_list.entries:
            resolvers = get_resolvers(cache_dir=cache_dir, ttl=timedelta(hours=max_age))
            if clear_cache:
                removed = sum(resolver.clear_cache() for resolver in resolvers)
                print_info(f"Cleared {removed} cached resolution(s)")
            stats = entry_list.resolve(resolvers, force=force)
        elif not no_resolve:
            print_warning("No entries found, nothing to resolve.")
    except ListConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    result = ListResult.create(entry_list)
    if output is not None:
        _write_result(result, output)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict(), default=str))
        return

    _show_categories(entry_list)

    summary = f"{len(entry_list.entries)} entry(s) in {len(entry_list.categories)} category(s)"
    if stats is not None:
        summary += f" (resolved {stats.resolved}/{stats.total}, {stats.cached} cached)"
    print_success(summary)
