"""Managed folder scanning and mutation.

This module provides raw filesystem facts about the managed folders,
the cleanup scanner, and the operator that creates, moves and removes
symlinks.
"""

from pathman.filesystem.errors import (
    FolderUnavailableError,
    LinkExistsError,
    LinkNotFoundError,
    MaskingError,
    NotASymlinkError,
    PathmanError,
)
from pathman.filesystem.folder import list_executables, list_links, list_links_both
from pathman.filesystem.operator import LinkAddResult, LinkOperator
from pathman.filesystem.scanner import CleanupScanner, scan_for_cleanup

__all__ = [
    "CleanupScanner",
    "FolderUnavailableError",
    "LinkAddResult",
    "LinkExistsError",
    "LinkNotFoundError",
    "LinkOperator",
    "MaskingError",
    "NotASymlinkError",
    "PathmanError",
    "list_executables",
    "list_links",
    "list_links_both",
    "scan_for_cleanup",
]
