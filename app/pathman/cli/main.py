"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from pathman import __version__
from pathman.cli.commands import (
    add,
    clean,
    init,
    listing,
    path,
    priority,
    remove,
    rename,
    summary,
    version,
)
from pathman.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="pathman",
    help="Manage the executables and directories on your PATH.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathman version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """pathman - manage the executables and directories on your PATH.

    Symlinks to single executables live in a front folder (searched before
    the rest of PATH) or a back folder (searched after it). Whole
    directories can be managed too. Run without a command to see a summary.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    _configure_logging(verbose, quiet)

    if ctx.invoked_subcommand is None:
        summary.summary()


# Register commands
app.command(name="init")(init.init)
app.command(name="add")(add.add)
app.command(name="remove")(remove.remove)
app.command(name="rm", hidden=True)(remove.remove)
app.command(name="rename")(rename.rename)
app.command(name="get")(priority.get)
app.command(name="set")(priority.set_priority)
app.command(name="list")(listing.list_entries)
app.command(name="ls", hidden=True)(listing.list_entries)
app.command(name="path")(path.path)
app.command(name="summary")(summary.summary)
app.command(name="clean")(clean.clean)
app.command(name="version")(version.version)


if __name__ == "__main__":
    app()
