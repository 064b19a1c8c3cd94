"""Clash detection.

Two kinds of clash are detected:

- name clashes: the same command name is linked from both the front and
  the back folder;
- masking clashes: a managed command shares its name with an unrelated
  executable somewhere else on PATH, so one of them hides the other.

Masking follows plain shell lookup: PATH is scanned left to right and the
first directory containing a file with the exact name wins. Platform
executable suffixes (``.exe``, ``PATHEXT``) are not considered.
"""

import logging
import os
from collections.abc import Callable, Collection, Iterable, Mapping, Sequence

from pathman.models.clash import ClashKind, ClashReport
from pathman.models.managed import ManagedExecutable, ManagedLink, Priority

logger = logging.getLogger(__name__)

FileExists = Callable[[str, str], bool]


def file_exists_in(directory: str, name: str) -> bool:
    """Check whether ``directory`` directly contains an entry called ``name``.

    Follows symlinks, so a dangling link does not count.
    """
    return os.path.exists(os.path.join(directory, name))


def find_name_clashes(front_names: Iterable[str], back_names: Iterable[str]) -> list[str]:
    """Return names linked from both managed folders, sorted alphabetically."""
    return sorted(set(front_names) & set(back_names))


def collect_managed_executables(
    links: Iterable[ManagedLink],
    front_folder: str,
    back_folder: str,
    directory_contents: Mapping[str, Iterable[str]] | None = None,
) -> list[ManagedExecutable]:
    """Build the list of managed executables with their hosting location.

    Args:
        links: Symlinks from both managed folders.
        front_folder: Folder hosting front links.
        back_folder: Folder hosting back links.
        directory_contents: Executable names per managed directory path, in
            configured order.

    Returns:
        Managed executables: links first, then directory contents.
    """
    executables = [
        ManagedExecutable(
            name=link.name,
            host=front_folder if link.priority == Priority.FRONT else back_folder,
        )
        for link in links
    ]
    for directory, names in (directory_contents or {}).items():
        executables.extend(ManagedExecutable(name=name, host=directory) for name in names)
    return executables


def _safe_exists(file_exists: FileExists, directory: str, name: str) -> bool:
    try:
        return file_exists(directory, name)
    except OSError as e:
        logger.warning("Cannot check %s for '%s': %s", directory, name, e)
        return False


def check_masking(
    name: str,
    host: str,
    path_dirs: Sequence[str],
    managed: Collection[str],
    file_exists: FileExists = file_exists_in,
) -> ClashReport | None:
    """Find the first unrelated executable sharing ``name`` on PATH.

    Args:
        name: Managed command name.
        host: Managed location providing the command.
        path_dirs: PATH entries in search order.
        managed: Managed locations, never treated as clashing with each other.
        file_exists: Predicate telling whether a directory holds a file.

    Returns:
        A report for the first hit, or None when no unrelated directory
        holds the name. The report is UNDETERMINED when ``host`` is not on
        PATH.
    """
    try:
        host_position = path_dirs.index(host)
    except ValueError:
        host_position = -1

    for i, directory in enumerate(path_dirs):
        if directory in managed:
            continue
        if not _safe_exists(file_exists, directory, name):
            continue
        if host_position == -1:
            kind = ClashKind.UNDETERMINED
        elif i < host_position:
            kind = ClashKind.MASKED
        else:
            kind = ClashKind.MASKS
        return ClashReport(name=name, host=host, kind=kind, other_dir=directory)

    return None


def find_masking_clashes(
    path_dirs: Sequence[str],
    managed_executables: Iterable[ManagedExecutable],
    *,
    managed_locations: Collection[str],
    file_exists: FileExists = file_exists_in,
) -> list[ClashReport]:
    """Report every managed executable that masks or is masked on PATH.

    Executables whose host is not on PATH are skipped. At most one report is
    produced per executable.

    Args:
        path_dirs: PATH entries in search order.
        managed_executables: Managed names with their hosting location.
        managed_locations: Both managed folders and every managed directory.
            None of them is treated as clashing with a managed executable.
        file_exists: Predicate telling whether a directory holds a file.

    Returns:
        Clash reports in the order of ``managed_executables``.
    """
    executables = list(managed_executables)
    managed = frozenset(managed_locations)

    clashes: list[ClashReport] = []
    for executable in executables:
        if executable.host not in path_dirs:
            logger.debug(
                "Skipping '%s': %s is not on PATH", executable.name, executable.host
            )
            continue
        report = check_masking(executable.name, executable.host, path_dirs, managed, file_exists)
        if report is not None:
            clashes.append(report)
    return clashes
