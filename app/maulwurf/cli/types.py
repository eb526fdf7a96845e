"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import json
from enum import Enum
from typing import Any

import typer

from maulwurf.core.config import AppConfigError, load_app_config
from maulwurf.core.state import AppState
from maulwurf.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def build_state(*, quiet: bool = False) -> AppState:
    """Load the tool configuration and build the application state.

    Args:
        quiet: Disable console echo of log messages.

    Returns:
        New AppState.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    try:
        config = load_app_config()
    except AppConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if quiet:
        config = config.model_copy(update={"console_echo": False})
    return AppState.create(config)


def get_state(ctx: typer.Context) -> AppState:
    """Get the AppState built by the main callback (or build one).

    Args:
        ctx: Typer context of the running command.

    Returns:
        The shared AppState for this invocation.
    """
    ctx.ensure_object(dict)
    state = ctx.obj.get("state")
    if state is None:
        state = build_state(quiet=bool(ctx.obj.get("quiet", False)))
        ctx.obj["state"] = state
    return state


def echo_json(data: Any) -> None:
    """Print data as indented JSON on stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
