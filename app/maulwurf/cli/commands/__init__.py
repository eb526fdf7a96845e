"""CLI commands for maulwurf.

This package contains all subcommand implementations.
"""

from maulwurf.cli.commands import fonts, invoke, logs, ls, serve, settings

__all__ = ["fonts", "invoke", "logs", "ls", "serve", "settings"]
