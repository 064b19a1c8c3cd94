"""Summary command implementation.

Shows the managed folders, the health of managed directories, and any
name or masking clashes.
"""

import os
from pathlib import Path

from rich.markup import escape

from pathman.cli.types import Workspace, load_workspace
from pathman.core.clashes import (
    collect_managed_executables,
    find_masking_clashes,
    find_name_clashes,
)
from pathman.core.paths import get_managed_folder
from pathman.filesystem.errors import FolderUnavailableError
from pathman.filesystem.folder import folder_exists, list_executables, list_links
from pathman.filesystem.scanner import probe_directory
from pathman.models.clash import ClashReport
from pathman.models.managed import ManagedLink, Priority
from pathman.utils.formatting import (
    console,
    create_table,
    format_priority,
    print_success,
    print_warning,
)


def summary() -> None:
    """Display a summary of the managed folders and any clashes."""
    workspace = load_workspace()
    _print_summary(workspace)


def _print_summary(workspace: Workspace) -> None:
    base = get_managed_folder()
    console.print("[bold_header]Pathman Managed Folder[/]")
    note = "" if folder_exists(base) else " [warning](does not exist - run 'pathman init')[/]"
    console.print(f"  Base:  {escape(str(base))}{note}")

    front_links, front_error = _read_folder(workspace.front, Priority.FRONT)
    back_links, back_error = _read_folder(workspace.back, Priority.BACK)
    console.print(f"  Front: {_folder_line(workspace.front, front_links, front_error)}")
    console.print(f"  Back:  {_folder_line(workspace.back, back_links, back_error)}")
    console.print()

    directories = workspace.config.managed_directories
    if directories:
        table = create_table(f"Managed Directories ({len(directories)})")
        table.add_column("Priority", width=8)
        table.add_column("Path")
        table.add_column("Status")
        for directory in directories:
            probe = probe_directory(directory.path)
            if not probe.exists:
                status = "[warning]does not exist[/]"
            elif probe.error is not None:
                status = f"[error]{escape(probe.error)}[/]"
            else:
                status = "[success]ok[/]"
            table.add_row(format_priority(directory.priority), escape(directory.path), status)
        console.print(table)
    else:
        console.print("[muted]No managed directories.[/]")
    console.print()

    unavailable = [
        (priority, error)
        for priority, error in ((Priority.FRONT, front_error), (Priority.BACK, back_error))
        if error is not None
    ]
    for _, error in unavailable:
        print_warning(escape(str(error)))

    name_clashes: list[str] = []
    if not unavailable and folder_exists(workspace.front) and folder_exists(workspace.back):
        name_clashes = find_name_clashes(
            (link.name for link in front_links), (link.name for link in back_links)
        )
    path_clashes = _find_path_clashes(workspace, [*front_links, *back_links])

    if not name_clashes and not path_clashes:
        if unavailable:
            skipped = " and ".join(priority.value for priority, _ in unavailable)
            print_warning(f"Clash checks skipped for the unavailable {skipped} folder.")
        else:
            print_success("No PATH clashes detected.")
        return

    if name_clashes:
        console.print("[warning]Name clashes detected (same name in both front and back):[/]")
        for name in name_clashes:
            console.print(f"  {escape(name)}")
        if path_clashes:
            console.print()

    if path_clashes:
        console.print("[warning]PATH clashes detected (masking or masked by other executables):[/]")
        for clash in path_clashes:
            console.print(f"  {escape(clash.describe())}")


def _read_folder(
    folder: Path, priority: Priority
) -> tuple[list[ManagedLink], FolderUnavailableError | None]:
    """List a folder's symlinks.

    A missing folder has no links. A folder that exists but cannot be read
    has no links and returns the error.
    """
    if not folder_exists(folder):
        return [], None
    try:
        return list_links(folder, priority), None
    except FolderUnavailableError as e:
        return [], e


def _folder_line(
    folder: Path, links: list[ManagedLink], error: FolderUnavailableError | None
) -> str:
    if error is not None:
        return f"{escape(str(folder))} [error]unavailable: {escape(error.reason)}[/]"
    return f"{escape(str(folder))} ({len(links)} symlinks)"


def _find_path_clashes(workspace: Workspace, links: list[ManagedLink]) -> list[ClashReport]:
    """Gather managed executables and check them against PATH."""
    contents = {
        directory.path: list_executables(directory.path)
        for directory in workspace.config.managed_directories
        if os.path.isdir(directory.path)
    }
    executables = collect_managed_executables(
        links, str(workspace.front), str(workspace.back), contents
    )
    return find_masking_clashes(
        workspace.path_dirs,
        executables,
        managed_locations=workspace.managed_locations,
    )
