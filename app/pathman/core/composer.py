"""PATH composition.

Builds the adjusted PATH value from the live PATH, the two managed
folders and the ordered list of managed directories. The result puts the
front folder and front directories before everything else and the back
directories and back folder after everything else. Existing occurrences of
managed locations are removed by exact string match first, so composing
the output of a previous composition changes nothing.
"""

import os
from collections.abc import Iterable, Sequence

from pathman.models.managed import ManagedDirectory, Priority


def split_path_list(value: str, sep: str = os.pathsep) -> list[str]:
    """Split a PATH-style value into its entries.

    An empty value yields an empty list rather than a single empty entry.
    Empty entries inside a non-empty value are kept as they are.

    Args:
        value: PATH-style string.
        sep: Path-list separator.

    Returns:
        Ordered list of entries.
    """
    if not value:
        return []
    return value.split(sep)


def managed_locations(
    front_folder: str,
    back_folder: str,
    managed_dirs: Iterable[ManagedDirectory],
) -> frozenset[str]:
    """Return every location pathman owns on PATH."""
    return frozenset({front_folder, back_folder, *(d.path for d in managed_dirs)})


def compose_path_entries(
    current_path: str,
    front_folder: str,
    back_folder: str,
    managed_dirs: Sequence[ManagedDirectory],
    *,
    sep: str = os.pathsep,
) -> list[str]:
    """Compose the adjusted PATH as an ordered list of entries.

    Args:
        current_path: Current value of PATH.
        front_folder: Managed front folder.
        back_folder: Managed back folder.
        managed_dirs: Managed directories in configured order.
        sep: Path-list separator.

    Returns:
        Entries in the order front folder, front directories, remaining
        PATH entries, back directories, back folder.

    Raises:
        ValueError: If either managed folder is empty.
    """
    if not front_folder or not back_folder:
        msg = "Front and back folders must be non-empty paths"
        raise ValueError(msg)

    front_dirs = [d.path for d in managed_dirs if d.priority == Priority.FRONT]
    back_dirs = [d.path for d in managed_dirs if d.priority == Priority.BACK]
    known = managed_locations(front_folder, back_folder, managed_dirs)

    residue = [entry for entry in split_path_list(current_path, sep) if entry not in known]

    # Managed locations are emitted once even if configured twice
    # (e.g. a managed directory equal to one of the folders).
    head: list[str] = []
    for location in (front_folder, *front_dirs):
        if location not in head:
            head.append(location)
    tail: list[str] = []
    for location in reversed((*back_dirs, back_folder)):
        if location not in head and location not in tail:
            tail.append(location)
    tail.reverse()

    return [*head, *residue, *tail]


def compose_path(
    current_path: str,
    front_folder: str,
    back_folder: str,
    managed_dirs: Sequence[ManagedDirectory],
    *,
    sep: str = os.pathsep,
) -> str:
    """Compose the adjusted PATH string.

    See :func:`compose_path_entries` for the ordering rules.

    Returns:
        The entries joined with ``sep``.
    """
    entries = compose_path_entries(current_path, front_folder, back_folder, managed_dirs, sep=sep)
    return sep.join(entries)


def is_on_path(folder: str, current_path: str, sep: str = os.pathsep) -> bool:
    """Check if a folder appears on PATH, ignoring trailing slashes and ``.`` parts."""
    wanted = os.path.normpath(folder)
    return any(
        entry and os.path.normpath(entry) == wanted for entry in split_path_list(current_path, sep)
    )
