"""Directory listing command.

Lists one directory the way the file browser sees it.
"""

from typing import Annotated

import typer

from maulwurf.cli.display import create_entries_table
from maulwurf.cli.types import OutputFormat, echo_json, get_state
from maulwurf.core import operations
from maulwurf.core.errors import MaulwurfError
from maulwurf.utils.formatting import console, print_error, print_info


def ls(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Directory to list.")],
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden entries."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List a directory and remember it as the last visited folder.

    Examples:
        maulwurf ls ~/gcode
        maulwurf ls 'C:\\'
        maulwurf ls . --all --format json
    """
    state = get_state(ctx)
    try:
        entries = operations.read_dir(state, path)
    except MaulwurfError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not show_all:
        entries = [entry for entry in entries if not entry.hidden]

    if output_format == OutputFormat.JSON:
        echo_json([entry.to_dict() for entry in entries])
        return

    if not entries:
        print_info(f"{path} is empty.")
        return

    console.print(create_entries_table(entries, title=path))
    console.print(f"\n[muted]{len(entries)} entries[/]")
