"""Cleanup scanner for broken symlinks and missing directories.

Walks the front and back folders looking for dangling or unreadable
symlinks, then checks every managed directory. Gathering facts (probes)
is kept apart from classifying them so the classification can be tested
without touching the filesystem.
"""

import errno
import logging
import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from pathman.filesystem.errors import FolderUnavailableError
from pathman.filesystem.folder import folder_exists, list_entries
from pathman.models.cleanup import CleanupCandidate, CleanupKind
from pathman.models.managed import ManagedDirectory, Priority

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SymlinkProbe:
    """Raw facts about one symlink in a managed folder.

    Attributes:
        name: Symlink file name.
        path: Full symlink path.
        target: Link target as stored, None if it could not be read.
        read_error: Error raised while reading the link, if any.
        target_exists: Whether the link resolves to an existing file.
    """

    name: str
    path: str
    target: str | None
    read_error: str | None
    target_exists: bool


@dataclass(frozen=True, slots=True)
class DirectoryProbe:
    """Raw facts about one managed directory.

    Attributes:
        path: Directory path.
        exists: Whether anything exists at the path.
        error: Why the directory cannot be used, None if it is healthy.
    """

    path: str
    exists: bool
    error: str | None


def probe_symlink(link: Path) -> SymlinkProbe:
    """Read a symlink and check whether its target resolves."""
    try:
        target = os.readlink(link)
    except OSError as e:
        return SymlinkProbe(
            name=link.name,
            path=str(link),
            target=None,
            read_error=e.strerror or str(e),
            target_exists=False,
        )

    try:
        link.stat()
        target_exists = True
    except FileNotFoundError:
        target_exists = False
    except OSError as e:
        # A symlink loop never resolves; other errors (e.g. permission on
        # the target) leave the link itself intact.
        target_exists = e.errno != errno.ELOOP

    return SymlinkProbe(
        name=link.name,
        path=str(link),
        target=target,
        read_error=None,
        target_exists=target_exists,
    )


def probe_directory(path: str) -> DirectoryProbe:
    """Check whether a managed directory exists and can be listed."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return DirectoryProbe(path=path, exists=False, error=None)
    except OSError as e:
        return DirectoryProbe(path=path, exists=True, error=e.strerror or str(e))

    if not os.path.isdir(path):
        return DirectoryProbe(path=path, exists=True, error="not a directory")

    try:
        with os.scandir(path):
            pass
    except OSError as e:
        return DirectoryProbe(path=path, exists=True, error=e.strerror or str(e))

    return DirectoryProbe(path=path, exists=True, error=None)


def classify_symlink(probe: SymlinkProbe, priority: Priority) -> CleanupCandidate | None:
    """Turn a symlink probe into a cleanup candidate, None if healthy."""
    if probe.read_error is not None:
        return CleanupCandidate(
            kind=CleanupKind.UNREADABLE_SYMLINK,
            identity=probe.name,
            path=probe.path,
            priority=priority,
            reason=f"Cannot read symlink target: {probe.read_error}",
        )
    if not probe.target_exists:
        return CleanupCandidate(
            kind=CleanupKind.BROKEN_SYMLINK,
            identity=probe.name,
            path=probe.path,
            priority=priority,
            reason=f"Target does not exist: {probe.target}",
        )
    return None


def classify_directory(
    probe: DirectoryProbe, directory: ManagedDirectory
) -> CleanupCandidate | None:
    """Turn a directory probe into a cleanup candidate, None if healthy."""
    if not probe.exists:
        return CleanupCandidate(
            kind=CleanupKind.MISSING_DIRECTORY,
            identity=directory.path,
            path=directory.path,
            priority=directory.priority,
            reason="Directory does not exist",
        )
    if probe.error is not None:
        return CleanupCandidate(
            kind=CleanupKind.INACCESSIBLE_DIRECTORY,
            identity=directory.path,
            path=directory.path,
            priority=directory.priority,
            reason=f"Cannot access: {probe.error}",
        )
    return None


class CleanupScanner:
    """Scans managed folders and directories for cleanup candidates.

    Results come in a fixed order: front folder symlinks, back folder
    symlinks, then managed directories in configured order.

    Args:
        front_folder: Managed front folder.
        back_folder: Managed back folder.
        managed_dirs: Managed directories in configured order.
    """

    def __init__(
        self,
        front_folder: Path,
        back_folder: Path,
        managed_dirs: Sequence[ManagedDirectory],
    ) -> None:
        self._folders = ((Path(front_folder), Priority.FRONT), (Path(back_folder), Priority.BACK))
        self._managed_dirs = tuple(managed_dirs)

    def scan(self) -> Iterator[CleanupCandidate]:
        """Yield cleanup candidates in scan order."""
        for folder, priority in self._folders:
            yield from self._scan_folder(folder, priority)

        for directory in self._managed_dirs:
            candidate = classify_directory(probe_directory(directory.path), directory)
            if candidate is not None:
                yield candidate

    def _scan_folder(self, folder: Path, priority: Priority) -> Iterator[CleanupCandidate]:
        """Yield candidates for broken or unreadable symlinks in one folder.

        A missing folder yields nothing. Non-symlink entries are ignored.
        """
        if not folder_exists(folder):
            return

        try:
            entries = list_entries(folder)
        except FolderUnavailableError as e:
            logger.warning("Skipping %s folder: %s", priority.value, e)
            return

        for entry in entries:
            link = Path(entry.path)
            if not link.is_symlink():
                continue
            candidate = classify_symlink(probe_symlink(link), priority)
            if candidate is not None:
                yield candidate


def scan_for_cleanup(
    front_folder: Path,
    back_folder: Path,
    managed_dirs: Sequence[ManagedDirectory],
) -> list[CleanupCandidate]:
    """Collect all cleanup candidates.

    Args:
        front_folder: Managed front folder.
        back_folder: Managed back folder.
        managed_dirs: Managed directories in configured order.

    Returns:
        Candidates, every one selected by default.
    """
    return list(CleanupScanner(front_folder, back_folder, managed_dirs).scan())
