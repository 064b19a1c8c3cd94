"""Init command implementation.

Creates the managed folders and wires them into the shell profile.
"""

import os
import stat
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from pathman.core.composer import is_on_path
from pathman.core.paths import (
    ensure_folder,
    get_back_folder,
    get_bash_profile_path,
    get_front_folder,
    get_managed_folder,
)
from pathman.core.profile import add_to_profile, get_shell_integration_script
from pathman.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def _check_permissions(folder: Path) -> None:
    """Warn if a folder is writable by group or others."""
    try:
        mode = folder.stat().st_mode
    except OSError as e:
        print_warning(f"Cannot check permissions of {escape(str(folder))}: {escape(str(e))}")
        return
    if mode & (stat.S_IWGRP | stat.S_IWOTH):
        print_warning(
            f"{escape(str(folder))} is writable by group or others "
            f"(mode {stat.S_IMODE(mode):o}); consider 'chmod 755'"
        )


def _is_bash_user() -> bool:
    return "bash" in os.environ.get("SHELL", "")


def init(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Update the shell profile without asking."),
    ] = False,
) -> None:
    """Create the managed folders and set up PATH integration."""
    base = get_managed_folder()
    front = get_front_folder()
    back = get_back_folder()

    try:
        ensure_folder(base, "managed")
        ensure_folder(front, "front")
        ensure_folder(back, "back")
    except RuntimeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Managed folder ready: {escape(str(base))}")
    for folder in (base, front, back):
        _check_permissions(folder)

    current_path = os.environ.get("PATH", "")
    if is_on_path(str(front), current_path) and is_on_path(str(back), current_path):
        print_info("Front and back folders are already on your PATH.")
        return

    print_info("The managed folders are not on your PATH yet.")

    if not _is_bash_user():
        console.print("\nAdd the following to your shell startup file:\n")
        console.print(escape(get_shell_integration_script()), highlight=False)
        return

    profile = get_bash_profile_path()
    if not yes and not typer.confirm(
        f"Add pathman to {profile}?",
        default=True,
    ):
        console.print("\nAdd the following to your shell startup file:\n")
        console.print(escape(get_shell_integration_script()), highlight=False)
        return

    try:
        added = add_to_profile(profile)
    except OSError as e:
        print_error(f"Cannot update {escape(str(profile))}: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if added:
        print_success(f"Updated {escape(str(profile))}")
        print_info("Start a new login shell to pick up the new PATH.")
    else:
        print_info(f"{escape(str(profile))} already sets up pathman.")
