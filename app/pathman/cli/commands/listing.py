"""List command implementation.

Lists managed symlinks and directories in compact, long or JSON form.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape

from pathman.cli.types import EntryType, load_workspace
from pathman.core.listing import ListEntry, build_entries, entries_to_json, sort_entries
from pathman.filesystem.errors import PathmanError
from pathman.filesystem.folder import list_links_both
from pathman.models.managed import Priority
from pathman.utils.formatting import console, create_table, format_priority, print_error


def list_entries(
    long: Annotated[
        bool,
        typer.Option("--long", "-l", help="Show symlink targets and priority."),
    ] = False,
    priority: Annotated[
        Priority | None,
        typer.Option("--priority", "-p", help="Only list this priority.", case_sensitive=False),
    ] = None,
    entry_type: Annotated[
        EntryType | None,
        typer.Option("--type", "-t", help="Only list files or directories.", case_sensitive=False),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Only list entries with this name."),
    ] = None,
    by_priority: Annotated[
        bool,
        typer.Option("--by-priority", help="Sort front entries before back entries."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Output in JSON format."),
    ] = False,
) -> None:
    """List all managed executables and directories."""
    workspace = load_workspace()

    try:
        links = list_links_both(workspace.front, workspace.back)
    except PathmanError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    entries = build_entries(
        links,
        workspace.config.managed_directories,
        priority=priority,
        entry_type=entry_type.value if entry_type is not None else None,
        name=name,
    )

    if as_json:
        typer.echo(json.dumps(entries_to_json(entries), indent=4))
        return

    ordered = sort_entries(entries, by_priority=by_priority)
    if long:
        _print_long(ordered)
        return

    for entry in ordered:
        label = f"{entry.label}/" if entry.is_directory else entry.label
        typer.echo(label)


def _print_long(entries: list[ListEntry]) -> None:
    """Display entries as a Rich table."""
    table = create_table("Managed Entries")
    table.add_column("Name", style="link.name")
    table.add_column("Type", width=10)
    table.add_column("Priority", width=8)
    table.add_column("Target", style="link.target")

    for entry in entries:
        table.add_row(
            escape(entry.label),
            entry.type_name,
            format_priority(entry.priority),
            escape(entry.target) if entry.target is not None else "-",
        )

    console.print(table)
