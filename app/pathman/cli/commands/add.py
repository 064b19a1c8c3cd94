"""Add command implementation.

Adds an executable as a symlink in a managed folder, or registers a whole
directory in the configuration.
"""

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from pathman.cli.types import Workspace, load_workspace
from pathman.core.config import ConfigError, save_config
from pathman.filesystem.errors import PathmanError
from pathman.models.managed import Priority
from pathman.utils.formatting import print_error, print_info, print_success, print_warning


def add(
    executable: Annotated[
        Path,
        typer.Argument(help="Executable file or directory to manage."),
    ],
    name: Annotated[
        str | None,
        typer.Option("--name", help="Custom name for the symlink."),
    ] = None,
    priority: Annotated[
        Priority,
        typer.Option("--priority", "-p", help="Folder to use.", case_sensitive=False),
    ] = Priority.FRONT,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite existing symlink and ignore masking warnings."),
    ] = False,
) -> None:
    """Add an executable or directory to the managed set.

    Files get a symlink in the front or back folder. Directories are added
    to the configuration; adding one again updates its priority.
    """
    workspace = load_workspace()
    abs_path = Path(os.path.abspath(executable))

    if not abs_path.exists():
        print_error(f"Path does not exist: {abs_path}")
        raise typer.Exit(code=1)

    if abs_path.is_dir():
        _add_directory(workspace, abs_path, priority)
        return

    try:
        result = workspace.operator().add_link(
            abs_path,
            priority,
            name=name,
            force=force,
            path_dirs=workspace.path_dirs,
            managed_locations=workspace.managed_locations,
        )
    except (PathmanError, ValueError, OSError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if result.warning is not None:
        print_warning(
            f"executable '{escape(result.link.name)}' exists at "
            f"{escape(result.warning.other_path)}"
        )
    if result.moved_from is not None:
        print_info(
            f"Moved '{escape(result.link.name)}' from {result.moved_from.value} to {priority.value}"
        )
    print_success(
        f"Added '{escape(result.link.name)}' -> '{escape(result.link.target)}' ({priority.value})"
    )


def _add_directory(workspace: Workspace, abs_path: Path, priority: Priority) -> None:
    """Register a directory, or update its priority."""
    config = workspace.config
    previous = config.find_directory(str(abs_path))

    if not config.upsert_directory(str(abs_path), priority):
        print_info(
            f"Directory already managed with priority '{priority.value}': {escape(str(abs_path))}"
        )
        return

    try:
        save_config(config, workspace.config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if previous is not None:
        print_success(
            f"Updated directory priority to '{priority.value}': {escape(str(abs_path))}"
        )
    else:
        print_success(f"Added directory ({priority.value}): {escape(str(abs_path))}")
