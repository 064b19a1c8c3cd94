"""Managed folder operator.

Creates, removes, renames and moves symlinks between the front and back
folders, and applies a confirmed set of cleanup candidates with dry-run
support. Batch cleanup isolates failures per item.
"""

import logging
import os
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pathman.core.clashes import check_masking
from pathman.filesystem.errors import (
    FolderUnavailableError,
    LinkExistsError,
    LinkNotFoundError,
    MaskingError,
    NotASymlinkError,
)
from pathman.filesystem.folder import find_link, folder_exists
from pathman.models.clash import ClashKind, ClashReport
from pathman.models.cleanup import CleanupActionResult, CleanupBatchResult, CleanupCandidate
from pathman.models.managed import ManagedDirectory, ManagedLink, Priority, validate_link_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LinkAddResult:
    """Result of adding a symlink.

    Attributes:
        link: The created symlink.
        moved_from: Folder the name was moved out of, if it existed there.
        warning: Same-named executable found while the folder is not on
            PATH, so masking could not be decided.
    """

    link: ManagedLink
    moved_from: Priority | None = None
    warning: ClashReport | None = None


class LinkOperator:
    """Performs symlink mutations in the managed folders.

    Attributes:
        _dry_run: If True, cleanup is simulated without modifying anything.
    """

    def __init__(self, front_folder: Path, back_folder: Path, dry_run: bool = False) -> None:
        """Initialize the LinkOperator.

        Args:
            front_folder: Managed front folder.
            back_folder: Managed back folder.
            dry_run: If True, report what cleanup would do without doing it.
        """
        self._front = Path(front_folder)
        self._back = Path(back_folder)
        self._dry_run = dry_run

    def folder(self, priority: Priority) -> Path:
        """Folder hosting links of the given priority."""
        return self._front if priority == Priority.FRONT else self._back

    def add_link(
        self,
        executable: Path,
        priority: Priority,
        *,
        name: str | None = None,
        force: bool = False,
        path_dirs: Sequence[str] = (),
        managed_locations: Collection[str] = (),
    ) -> LinkAddResult:
        """Create a symlink to an executable in the priority folder.

        An existing link of the same name in the other folder is moved.

        Args:
            executable: Absolute path of the executable.
            priority: Folder to add the link to.
            name: Link name, defaults to the executable's file name.
            force: Overwrite an existing link and ignore masking clashes.
            path_dirs: Current PATH entries, used for the masking check.
            managed_locations: Managed locations excluded from the masking check.

        Returns:
            LinkAddResult describing the change.

        Raises:
            FolderUnavailableError: If the priority folder does not exist.
            LinkExistsError: If the link exists and ``force`` is False.
            MaskingError: If the link would mask or be masked and ``force``
                is False.
            OSError: If the filesystem operation fails.
        """
        folder = self.folder(priority)
        if not folder_exists(folder):
            raise FolderUnavailableError(str(folder), "does not exist, run 'pathman init'")

        link_name = name or executable.name
        link = ManagedLink(name=link_name, target=str(executable), priority=priority)
        link_path = folder / link_name

        exists = link_path.is_symlink() or link_path.exists()
        if exists and not force:
            msg = f"Symlink already exists: {link_name} (use --force to overwrite)"
            raise LinkExistsError(msg)

        warning: ClashReport | None = None
        if not force:
            managed = {str(self._front), str(self._back), *managed_locations}
            report = check_masking(link_name, str(folder), path_dirs, managed)
            if report is not None and report.kind == ClashKind.UNDETERMINED:
                warning = report
            elif report is not None:
                verb = "will be masked by" if report.kind == ClashKind.MASKED else "will mask"
                msg = (
                    f"Symlink '{link_name}' {verb} existing executable at "
                    f"{report.other_path} (use --force to add anyway)"
                )
                raise MaskingError(msg)

        if exists:
            link_path.unlink()

        moved_from: Priority | None = None
        other_path = self.folder(priority.other) / link_name
        if other_path.is_symlink():
            other_path.unlink()
            moved_from = priority.other
            logger.debug("Removed '%s' from %s folder", link_name, priority.other.value)

        link_path.symlink_to(executable)
        logger.debug("Created %s -> %s", link_path, executable)
        return LinkAddResult(link=link, moved_from=moved_from, warning=warning)

    def _locate_symlink(self, name: str) -> tuple[Path, Priority]:
        try:
            validate_link_name(name)
        except ValueError as e:
            raise LinkNotFoundError(f"Symlink does not exist: {name}") from e
        found = find_link(name, self._front, self._back)
        if found is None:
            raise LinkNotFoundError(f"Symlink does not exist: {name}")
        path, priority = found
        if not path.is_symlink():
            raise NotASymlinkError(f"'{name}' is not a symlink")
        return path, priority

    def get_priority(self, name: str) -> Priority:
        """Return the folder a symlink lives in.

        Raises:
            LinkNotFoundError: If neither folder holds the name.
            NotASymlinkError: If the entry is not a symlink.
        """
        _, priority = self._locate_symlink(name)
        return priority

    def remove_link(self, name: str) -> Priority:
        """Remove a symlink, searching the front folder first.

        Returns:
            Priority of the folder the link was removed from.

        Raises:
            LinkNotFoundError: If neither folder holds the name.
            NotASymlinkError: If the entry is not a symlink.
            OSError: If the link cannot be removed.
        """
        path, priority = self._locate_symlink(name)
        path.unlink()
        return priority

    def rename_link(self, old_name: str, new_name: str) -> Priority:
        """Rename a symlink within its folder.

        Returns:
            Priority of the folder holding the link.

        Raises:
            LinkNotFoundError: If neither folder holds ``old_name``.
            NotASymlinkError: If the entry is not a symlink.
            ValueError: If ``new_name`` is not a valid file name.
            LinkExistsError: If ``new_name`` already exists in that folder.
            OSError: If the rename fails.
        """
        validate_link_name(new_name)
        path, priority = self._locate_symlink(old_name)
        new_path = path.with_name(new_name)
        if new_path.is_symlink() or new_path.exists():
            raise LinkExistsError(f"Symlink already exists: {new_name}")
        path.rename(new_path)
        return priority

    def set_priority(self, name: str, priority: Priority) -> bool:
        """Move a symlink to the folder of the given priority.

        The link is recreated in the destination before the source is
        deleted; if the deletion fails the new link is removed again.

        Returns:
            False if the link already had that priority, True if moved.

        Raises:
            LinkNotFoundError: If neither folder holds the name.
            NotASymlinkError: If the entry is not a symlink.
            LinkExistsError: If the destination already holds the name.
            OSError: If the move fails.
        """
        source, current = self._locate_symlink(name)
        if current == priority:
            return False

        target = os.readlink(source)
        destination_folder = self.folder(priority)
        destination_folder.mkdir(mode=0o755, parents=True, exist_ok=True)
        destination = destination_folder / name
        if destination.is_symlink() or destination.exists():
            raise LinkExistsError(f"Symlink '{name}' already exists in {priority.value} folder")

        destination.symlink_to(target)
        try:
            source.unlink()
        except OSError:
            destination.unlink()
            raise
        return True

    def apply_cleanup(
        self,
        candidates: Iterable[CleanupCandidate],
        managed_dirs: Sequence[ManagedDirectory],
    ) -> CleanupBatchResult:
        """Clean up the selected candidates.

        Symlink candidates are deleted; directory candidates are dropped
        from the managed directory list. A failure on one item does not
        stop the others.

        Args:
            candidates: Candidates; only selected ones are processed.
            managed_dirs: Current managed directories in configured order.

        Returns:
            CleanupBatchResult with per-item outcomes and the remaining
            managed directories for the caller to persist.
        """
        batch = CleanupBatchResult(remaining_directories=list(managed_dirs))

        for candidate in candidates:
            if not candidate.selected:
                continue
            if candidate.kind.is_symlink:
                batch.results.append(self._delete_symlink(candidate))
            else:
                batch.results.append(self._drop_directory(candidate, batch))

        return batch

    def _delete_symlink(self, candidate: CleanupCandidate) -> CleanupActionResult:
        """Delete the symlink behind a candidate, refusing anything else."""
        path = Path(candidate.path)
        if not path.is_symlink():
            return CleanupActionResult(
                candidate=candidate,
                success=False,
                error=f"Not a symlink: {path}",
            )

        if self._dry_run:
            logger.info("Dry-run: would remove symlink %s", path)
            return CleanupActionResult(candidate=candidate, success=True, dry_run=True)

        try:
            path.unlink()
        except OSError as e:
            return CleanupActionResult(candidate=candidate, success=False, error=str(e))
        return CleanupActionResult(candidate=candidate, success=True)

    def _drop_directory(
        self, candidate: CleanupCandidate, batch: CleanupBatchResult
    ) -> CleanupActionResult:
        """Remove a directory candidate from the remaining directory list."""
        remaining = batch.remaining_directories
        for i, directory in enumerate(remaining):
            if directory.path == candidate.path:
                if self._dry_run:
                    logger.info("Dry-run: would remove directory %s", candidate.path)
                    return CleanupActionResult(candidate=candidate, success=True, dry_run=True)
                del remaining[i]
                return CleanupActionResult(candidate=candidate, success=True)

        return CleanupActionResult(
            candidate=candidate,
            success=False,
            error=f"Directory is not managed: {candidate.path}",
        )
