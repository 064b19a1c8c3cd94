"""Priority commands: show or change the folder a symlink lives in."""

from typing import Annotated

import typer
from rich.markup import escape

from pathman.cli.types import load_workspace
from pathman.filesystem.errors import PathmanError
from pathman.models.managed import Priority
from pathman.utils.formatting import (
    console,
    format_priority,
    print_error,
    print_info,
    print_success,
)


def get(
    name: Annotated[str, typer.Argument(help="Symlink name.")],
) -> None:
    """Show the priority of a symlink."""
    workspace = load_workspace()

    try:
        priority = workspace.operator().get_priority(name)
    except PathmanError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    console.print(f"{escape(name)}: {format_priority(priority)}")


def set_priority(
    name: Annotated[str, typer.Argument(help="Symlink name.")],
    priority: Annotated[
        Priority,
        typer.Option("--priority", "-p", help="Target folder.", case_sensitive=False),
    ],
) -> None:
    """Move a symlink between the front and back folders."""
    workspace = load_workspace()

    try:
        moved = workspace.operator().set_priority(name, priority)
    except (PathmanError, OSError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if not moved:
        print_info(f"'{escape(name)}' already has priority {priority.value}")
        return
    print_success(f"Moved '{escape(name)}' from {priority.other.value} to {priority.value}")
