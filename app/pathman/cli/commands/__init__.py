"""CLI commands for pathman.

Each module holds one command function; registration happens in
pathman.cli.main.
"""

from pathman.cli.commands import (
    add,
    clean,
    init,
    listing,
    path,
    priority,
    remove,
    rename,
    summary,
    version,
)

__all__ = [
    "add",
    "clean",
    "init",
    "listing",
    "path",
    "priority",
    "remove",
    "rename",
    "summary",
    "version",
]
