"""CLI package for maulwurf.

This package contains the Typer application and all subcommands.
"""

from maulwurf.cli.main import app

__all__ = ["app"]
