"""Fonts command.

Lists the editor font catalog.
"""

from typing import Annotated

import typer

from maulwurf.cli.types import OutputFormat, echo_json, get_state
from maulwurf.core import operations
from maulwurf.core.errors import MaulwurfError
from maulwurf.utils.formatting import console


def fonts(
    ctx: typer.Context,
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
    """List the fonts offered in the editor font menu."""
    catalog = operations.get_system_fonts(get_state(ctx))

    if output_format == OutputFormat.JSON:
        echo_json(catalog)
        return

    try:
        current: str | None = operations.get_settings(get_state(ctx)).font_family
    except MaulwurfError:
        current = None

    for name in catalog:
        marker = "[success]*[/] " if name == current else "  "
        console.print(f"{marker}{name}")
