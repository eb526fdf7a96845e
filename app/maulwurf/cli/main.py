"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from maulwurf import __version__
from maulwurf.cli.commands import fonts, invoke, logs, ls, serve, settings

app = typer.Typer(
    name="maulwurf",
    help="Backend for the Maulwurf G-code editor.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"maulwurf version {__version__}")
        raise typer.Exit()


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
            help="Enable diagnostic logging on stderr.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Do not echo log messages to the console.",
        ),
    ] = False,
) -> None:
    """maulwurf - file browsing, logging and settings for the G-code editor.

    Every command works on the same settings file and log file the
    editor uses.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    # State is built lazily by the first command that needs it
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


app.command("ls")(ls.ls)
app.command("fonts")(fonts.fonts)
app.command("invoke")(invoke.invoke)
app.command("serve")(serve.serve)
app.add_typer(logs.app, name="logs")
app.add_typer(settings.app, name="settings")


if __name__ == "__main__":
    app()
