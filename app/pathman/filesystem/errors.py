"""Exceptions raised by the managed folder operations."""


class PathmanError(Exception):
    """Base exception for pathman operations."""


class FolderUnavailableError(PathmanError):
    """Raised when a managed folder does not exist or cannot be read.

    Distinct from an empty folder, which is not an error.
    """

    def __init__(self, folder: str, reason: str) -> None:
        self.folder = folder
        self.reason = reason
        super().__init__(f"Folder unavailable: {folder} ({reason})")


class LinkExistsError(PathmanError):
    """Raised when a symlink with the requested name already exists."""


class LinkNotFoundError(PathmanError):
    """Raised when no managed symlink or directory matches a name."""


class NotASymlinkError(PathmanError):
    """Raised when a managed folder entry is not a symlink."""


class MaskingError(PathmanError):
    """Raised when a new symlink would mask or be masked on PATH."""
