"""Rename command implementation."""

from typing import Annotated

import typer
from rich.markup import escape

from pathman.cli.types import load_workspace
from pathman.filesystem.errors import PathmanError
from pathman.utils.formatting import print_error, print_success


def rename(
    old_name: Annotated[str, typer.Argument(help="Current symlink name.")],
    new_name: Annotated[str, typer.Argument(help="New symlink name.")],
) -> None:
    """Rename a symlink in whichever managed folder holds it."""
    workspace = load_workspace()

    try:
        priority = workspace.operator().rename_link(old_name, new_name)
    except (PathmanError, ValueError, OSError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Renamed '{escape(old_name)}' to '{escape(new_name)}' (in {priority.value})")
