"""Path command implementation.

Prints the adjusted PATH so a shell can export it.
"""

import typer

from pathman.cli.types import load_workspace
from pathman.core.composer import compose_path


def path() -> None:
    """Output PATH with the managed folders and directories included.

    Existing occurrences of managed locations are removed, the front folder
    and front directories go first and the back directories and back
    folder go last.
    """
    workspace = load_workspace()
    adjusted = compose_path(
        workspace.path_value,
        str(workspace.front),
        str(workspace.back),
        workspace.config.managed_directories,
    )
    typer.echo(adjusted)
