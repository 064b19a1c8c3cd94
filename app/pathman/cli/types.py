"""Shared types and helpers for CLI commands.

Environment variables and the configuration file are read here, once per
invocation, and handed to the core as plain data.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pathman.core.composer import managed_locations, split_path_list
from pathman.core.config import PathmanConfig, require_config
from pathman.core.paths import get_back_folder, get_config_path, get_front_folder
from pathman.filesystem.operator import LinkOperator


class EntryType(str, Enum):
    """Kinds of managed entry for list filtering."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Workspace:
    """Everything a command needs to know about the managed state.

    Attributes:
        front: Managed front folder.
        back: Managed back folder.
        config_path: Location of the configuration file.
        config: Loaded configuration.
        path_value: Value of PATH when the command started.
    """

    front: Path
    back: Path
    config_path: Path
    config: PathmanConfig
    path_value: str

    @property
    def path_dirs(self) -> list[str]:
        """PATH entries in search order."""
        return split_path_list(self.path_value)

    @property
    def managed_locations(self) -> frozenset[str]:
        """Both folders plus every managed directory."""
        return managed_locations(
            str(self.front), str(self.back), self.config.managed_directories
        )

    def operator(self, dry_run: bool = False) -> LinkOperator:
        """Create a LinkOperator for the managed folders."""
        return LinkOperator(self.front, self.back, dry_run=dry_run)


def load_workspace() -> Workspace:
    """Read folders, configuration and PATH for the current invocation.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    config_path = get_config_path()
    return Workspace(
        front=get_front_folder(),
        back=get_back_folder(),
        config_path=config_path,
        config=require_config(config_path),
        path_value=os.environ.get("PATH", ""),
    )
