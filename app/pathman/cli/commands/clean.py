"""Clean command implementation.

Finds broken symlinks and missing managed directories, lets the user
deselect items, and removes the rest.
"""

from typing import Annotated

import typer
from rich.markup import escape

from pathman.cli.types import load_workspace
from pathman.core.config import ConfigError, save_config
from pathman.filesystem.scanner import scan_for_cleanup
from pathman.models.cleanup import CleanupBatchResult, CleanupCandidate
from pathman.utils.formatting import (
    console,
    create_table,
    format_priority,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def clean(
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Remove everything found without prompting."),
    ] = False,
) -> None:
    """Remove broken symlinks and missing managed directories."""
    workspace = load_workspace()
    candidates = scan_for_cleanup(
        workspace.front, workspace.back, workspace.config.managed_directories
    )

    if not candidates:
        print_success("No cleanup items found. Your pathman installation is clean!")
        return

    _print_candidates(candidates, dry_run)

    if not dry_run and not yes:
        _prompt_deselect(candidates)
        selected = [c for c in candidates if c.selected]
        if not selected:
            print_info("No items selected. Nothing to clean up.")
            return
        confirmed = typer.confirm(
            f"\nProceed with removing {len(selected)} item(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    batch = workspace.operator(dry_run=dry_run).apply_cleanup(
        candidates, workspace.config.managed_directories
    )

    if batch.directories_changed:
        workspace.config.managed_directories = batch.remaining_directories
        try:
            save_config(workspace.config, workspace.config_path)
        except ConfigError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e

    _print_results(batch)

    if batch.failed:
        raise typer.Exit(code=1)


def _prompt_deselect(candidates: list[CleanupCandidate]) -> None:
    """Ask which items to keep and deselect them.

    Raises:
        typer.Exit: If the answer is not a list of item numbers.
    """
    answer = typer.prompt(
        "Numbers of items to keep (space separated, empty to remove all)",
        default="",
        show_default=False,
    )
    for token in answer.replace(",", " ").split():
        try:
            index = int(token)
        except ValueError:
            print_error(f"Not an item number: {escape(token)}")
            raise typer.Exit(code=1) from None
        if not 1 <= index <= len(candidates):
            print_error(f"No item number {index}")
            raise typer.Exit(code=1)
        candidates[index - 1].selected = False


def _print_candidates(candidates: list[CleanupCandidate], dry_run: bool) -> None:
    """Display cleanup candidates with their item numbers."""
    title = "Cleanup Candidates (dry-run)" if dry_run else "Cleanup Candidates"
    table = create_table(title)
    table.add_column("#", justify="right", width=3)
    table.add_column("Priority", width=8)
    table.add_column("Item", style="bold")
    table.add_column("Kind", width=22)
    table.add_column("Reason", style="dim")

    for i, candidate in enumerate(candidates, start=1):
        table.add_row(
            str(i),
            format_priority(candidate.priority),
            escape(candidate.identity),
            candidate.kind.value,
            escape(candidate.reason),
        )

    console.print(table)


def _print_results(batch: CleanupBatchResult) -> None:
    """Display cleanup results."""
    table = create_table("Cleanup Results")
    table.add_column("Item", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in batch.results:
        is_link = r.candidate.kind.is_symlink
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would remove symlink" if is_link else "Would remove from config"
        elif r.success:
            status = "[success]removed[/]"
            detail = "Symlink deleted" if is_link else "Removed from config"
        else:
            status = "[error]failed[/]"
            detail = escape(r.error or "Unknown error")
        table.add_row(escape(r.candidate.identity), status, detail)

    console.print(table)

    dry_count = sum(1 for r in batch.results if r.dry_run)
    success_count = len(batch.succeeded)
    fail_count = len(batch.failed)

    if dry_count:
        print_info(f"Dry-run: {dry_count} item(s) would be removed.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"Successfully cleaned up {success_count} item(s).")
