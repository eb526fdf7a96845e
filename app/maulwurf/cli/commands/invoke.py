"""Invoke command.

Calls any backend operation by name, the way the editor front end does,
and prints the result as JSON.
"""

import json
from typing import Annotated, Any

import typer

from maulwurf.cli.types import echo_json, get_state
from maulwurf.core.errors import MaulwurfError
from maulwurf.core.operations import OPERATIONS, dispatch
from maulwurf.utils.formatting import print_error


def invoke(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Argument(help="Operation name, e.g. read_dir."),
    ] = None,
    args: Annotated[
        str,
        typer.Option(
            "--args",
            "-a",
            help='Keyword arguments as a JSON object, e.g. {"path": "."}.',
        ),
    ] = "{}",
    list_operations: Annotated[
        bool,
        typer.Option("--list", "-l", help="List operation names and exit."),
    ] = False,
) -> None:
    """Invoke a backend operation by name and print its JSON result.

    Examples:
        maulwurf invoke get_system_fonts
        maulwurf invoke read_dir --args '{"path": "/tmp"}'
        maulwurf invoke add_favorite_folder -a '{"path": "/srv/cnc"}'
    """
    if list_operations:
        for operation_name in sorted(OPERATIONS):
            typer.echo(operation_name)
        return
    if name is None:
        print_error("Missing operation name (see --list)")
        raise typer.Exit(code=1)

    try:
        parsed: Any = json.loads(args)
    except json.JSONDecodeError as e:
        print_error(f"--args is not valid JSON: {e}")
        raise typer.Exit(code=1) from None
    if not isinstance(parsed, dict):
        print_error("--args must be a JSON object")
        raise typer.Exit(code=1)

    try:
        result = dispatch(get_state(ctx), name, parsed)
    except MaulwurfError as e:
        print_error(f"{e.kind}: {e}")
        raise typer.Exit(code=1) from None

    echo_json(result)
