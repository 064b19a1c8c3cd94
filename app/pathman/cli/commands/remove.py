"""Remove command implementation."""

import os
from typing import Annotated

import typer
from rich.markup import escape

from pathman.cli.types import load_workspace
from pathman.core.config import ConfigError, save_config
from pathman.filesystem.errors import LinkNotFoundError, PathmanError
from pathman.utils.formatting import print_error, print_success


def remove(
    name: Annotated[
        str,
        typer.Argument(help="Symlink name, or managed directory path."),
    ],
) -> None:
    """Remove a symlink or a managed directory.

    Symlinks are looked up in the front folder, then the back folder. If
    no symlink matches, NAME is treated as a directory path.
    """
    workspace = load_workspace()

    try:
        priority = workspace.operator().remove_link(name)
    except LinkNotFoundError:
        pass
    except (PathmanError, OSError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    else:
        print_success(f"Removed '{escape(name)}' (from {priority.value})")
        return

    abs_path = os.path.abspath(name)
    config = workspace.config
    if not config.remove_directory(abs_path):
        print_error(f"Not found as symlink or managed directory: {escape(abs_path)}")
        raise typer.Exit(code=1)

    try:
        save_config(config, workspace.config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    print_success(f"Removed directory: {escape(abs_path)}")
