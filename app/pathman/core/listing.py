"""Listing of managed entries.

Combines symlinks and managed directories into one view, with filtering
by priority, type and name and two sort orders.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pathman.models.managed import ManagedDirectory, ManagedLink, Priority


@dataclass(frozen=True, slots=True)
class ListEntry:
    """A managed symlink or directory as shown by ``pathman list``.

    Attributes:
        is_directory: True for managed directories, False for symlinks.
        label: Symlink name, or directory path.
        priority: Priority of the entry.
        target: Symlink target (None for directories).
    """

    is_directory: bool
    label: str
    priority: Priority
    target: str | None = None

    @property
    def type_name(self) -> str:
        """Entry type as shown to the user."""
        return "directory" if self.is_directory else "file"


def build_entries(
    links: Iterable[ManagedLink],
    directories: Iterable[ManagedDirectory],
    *,
    priority: Priority | None = None,
    entry_type: str | None = None,
    name: str | None = None,
) -> list[ListEntry]:
    """Combine links and directories, applying the filters.

    Args:
        links: Symlinks from the managed folders.
        directories: Managed directories in configured order.
        priority: Keep only entries of this priority.
        entry_type: Keep only "file" or "directory" entries.
        name: Keep only symlinks with this name, or directories whose base
            name matches.

    Returns:
        Filtered entries, symlinks first.
    """
    entries: list[ListEntry] = []

    if entry_type in (None, "file"):
        for link in links:
            if priority is not None and link.priority != priority:
                continue
            if name and link.name != name:
                continue
            entries.append(
                ListEntry(
                    is_directory=False,
                    label=link.name,
                    priority=link.priority,
                    target=link.target,
                )
            )

    if entry_type in (None, "directory"):
        for directory in directories:
            if priority is not None and directory.priority != priority:
                continue
            if name and os.path.basename(directory.path.rstrip(os.sep)) != name:
                continue
            entries.append(
                ListEntry(is_directory=True, label=directory.path, priority=directory.priority)
            )

    return entries


def sort_entries(entries: Iterable[ListEntry], *, by_priority: bool = False) -> list[ListEntry]:
    """Sort entries for display.

    By default files come before directories; with ``by_priority`` front
    entries come before back entries. Ties are broken alphabetically.
    """
    if by_priority:
        return sorted(entries, key=lambda e: (e.priority != Priority.FRONT, e.label))
    return sorted(entries, key=lambda e: (e.is_directory, e.label))


def entries_to_json(entries: Iterable[ListEntry]) -> dict[str, list[dict[str, Any]]]:
    """Convert entries to the ``pathman list --json`` document."""
    ordered = sort_entries(entries)
    return {
        "files": [
            {"file": e.label, "symlink": e.target, "priority": e.priority.value}
            for e in ordered
            if not e.is_directory
        ],
        "directories": [
            {"directory": e.label, "priority": e.priority.value}
            for e in ordered
            if e.is_directory
        ],
    }
