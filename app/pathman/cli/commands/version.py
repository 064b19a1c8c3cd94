"""Version command implementation."""

import json
from typing import Annotated

import typer

from pathman import __source__, __version__


def version(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print version information as JSON."),
    ] = False,
) -> None:
    """Show the pathman version."""
    if as_json:
        typer.echo(json.dumps({"version": __version__, "source": __source__}, indent=4))
        return
    typer.echo(f"pathman version {__version__}")
