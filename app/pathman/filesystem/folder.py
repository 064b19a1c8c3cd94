"""Raw facts about managed folders and directories.

Functions here only read the filesystem; deciding what is a clash or a
cleanup candidate happens in the callers.
"""

import logging
import os
import stat
from pathlib import Path

from pathman.filesystem.errors import FolderUnavailableError
from pathman.models.managed import ManagedLink, Priority

logger = logging.getLogger(__name__)

UNREADABLE_TARGET = "<error reading link>"


def folder_exists(folder: Path) -> bool:
    """Check if a folder exists and is a directory."""
    return folder.is_dir()


def list_entries(folder: Path) -> list[os.DirEntry[str]]:
    """List the direct children of a folder, sorted by name.

    Raises:
        FolderUnavailableError: If the folder does not exist or cannot be read.
    """
    try:
        with os.scandir(folder) as it:
            return sorted(it, key=lambda e: e.name)
    except FileNotFoundError as e:
        raise FolderUnavailableError(str(folder), "does not exist") from e
    except NotADirectoryError as e:
        raise FolderUnavailableError(str(folder), "not a directory") from e
    except PermissionError as e:
        raise FolderUnavailableError(str(folder), "permission denied") from e
    except OSError as e:
        raise FolderUnavailableError(str(folder), str(e)) from e


def _is_symlink(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_symlink()
    except OSError:
        return False


def list_links(folder: Path, priority: Priority) -> list[ManagedLink]:
    """List the symlinks in a managed folder, sorted by name.

    Non-symlink entries are ignored. A link whose target cannot be read is
    listed with a placeholder target.

    Args:
        folder: Managed folder to list.
        priority: Priority of links in this folder.

    Returns:
        Symlinks in the folder.

    Raises:
        FolderUnavailableError: If the folder does not exist or cannot be read.
    """
    links: list[ManagedLink] = []
    for entry in list_entries(folder):
        if not _is_symlink(entry):
            continue
        try:
            target = os.readlink(entry.path)
        except OSError as e:
            logger.warning("Cannot read symlink %s: %s", entry.path, e)
            target = UNREADABLE_TARGET
        links.append(ManagedLink(name=entry.name, target=target, priority=priority))
    return links


def list_links_both(front_folder: Path, back_folder: Path) -> list[ManagedLink]:
    """List symlinks from both folders, front first.

    A missing folder contributes nothing.
    """
    links: list[ManagedLink] = []
    for folder, priority in ((front_folder, Priority.FRONT), (back_folder, Priority.BACK)):
        if not folder_exists(folder):
            continue
        links.extend(list_links(folder, priority))
    return links


def find_link(name: str, front_folder: Path, back_folder: Path) -> tuple[Path, Priority] | None:
    """Locate a managed entry by name, searching front then back.

    Returns:
        The entry path and the priority of its folder, or None.
    """
    for folder, priority in ((front_folder, Priority.FRONT), (back_folder, Priority.BACK)):
        candidate = folder / name
        if candidate.is_symlink() or candidate.exists():
            return candidate, priority
    return None


def list_executables(directory: str) -> list[str]:
    """List executable files directly inside a directory, sorted by name.

    Unreadable or missing directories yield an empty list.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning("Cannot list managed directory %s: %s", directory, e)
        return []

    names: list[str] = []
    for entry in entries:
        try:
            info = entry.stat()
        except OSError:
            continue
        if stat.S_ISDIR(info.st_mode):
            continue
        if info.st_mode & 0o111:
            names.append(entry.name)
    return names
