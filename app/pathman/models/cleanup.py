"""Cleanup candidate and result models.

Candidates are produced fresh by every scan and handed to the interactive
confirmation step; they are never persisted.
"""

from dataclasses import dataclass, field
from enum import Enum

from pathman.models.managed import ManagedDirectory, Priority


class CleanupKind(str, Enum):
    """Kind of problem found by the cleanup scanner.

    Attributes:
        BROKEN_SYMLINK: Symlink whose target does not exist.
        UNREADABLE_SYMLINK: Symlink that cannot be read.
        MISSING_DIRECTORY: Managed directory that no longer exists.
        INACCESSIBLE_DIRECTORY: Managed directory that exists but cannot be
            used (permission denied, not a directory).
    """

    BROKEN_SYMLINK = "broken_symlink"
    UNREADABLE_SYMLINK = "unreadable_symlink"
    MISSING_DIRECTORY = "missing_directory"
    INACCESSIBLE_DIRECTORY = "inaccessible_directory"

    @property
    def is_symlink(self) -> bool:
        """Check if this kind refers to a symlink in a managed folder."""
        return self in (CleanupKind.BROKEN_SYMLINK, CleanupKind.UNREADABLE_SYMLINK)


@dataclass(slots=True)
class CleanupCandidate:
    """A detected problem that the user may choose to clean up.

    Only ``selected`` is expected to change after creation; the UI toggles it.

    Attributes:
        kind: Kind of problem.
        identity: Symlink name, or managed directory path.
        path: Full path of the symlink, or the directory path.
        priority: Folder or priority of the affected item.
        reason: Human-readable cause.
        selected: Whether the item will be cleaned up.
    """

    kind: CleanupKind
    identity: str
    path: str
    priority: Priority
    reason: str
    selected: bool = True

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.identity:
            msg = "Candidate identity cannot be empty"
            raise ValueError(msg)

    @property
    def description(self) -> str:
        """One-line description for display."""
        return f"[{self.priority.value}] {self.identity} ({self.reason})"


@dataclass(frozen=True, slots=True)
class CleanupActionResult:
    """Outcome of cleaning up a single candidate.

    Attributes:
        candidate: The candidate that was processed.
        success: Whether the cleanup completed.
        error: Error message if it failed.
        dry_run: Whether this was a simulation.
    """

    candidate: CleanupCandidate
    success: bool
    error: str | None = None
    dry_run: bool = False


@dataclass(slots=True)
class CleanupBatchResult:
    """Summary of applying a set of cleanup candidates.

    Attributes:
        results: Per-item outcomes in processing order.
        remaining_directories: Managed directory list after removals, in
            configured order. The caller persists it.
    """

    results: list[CleanupActionResult] = field(default_factory=list)
    remaining_directories: list[ManagedDirectory] = field(default_factory=list)

    @property
    def succeeded(self) -> list[CleanupActionResult]:
        """Results that completed."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[CleanupActionResult]:
        """Results that failed."""
        return [r for r in self.results if not r.success]

    @property
    def directories_changed(self) -> bool:
        """Check if any managed directory entry was removed."""
        return any(
            r.success and not r.dry_run and not r.candidate.kind.is_symlink
            for r in self.results
        )
