"""CLI package for pathman.

This package contains the Typer application and all subcommands.
"""

from pathman.cli.main import app

__all__ = ["app"]
