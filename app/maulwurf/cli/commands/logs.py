"""Log commands.

Provides `maulwurf logs` subcommands to add messages to the debug log,
show it, clear it, and locate the log file.

The in-memory log lives only as long as the process; `show` therefore
reports what this invocation logged. The log file keeps everything.
"""

from typing import Annotated

import typer

from maulwurf.cli.display import create_logs_table
from maulwurf.cli.types import OutputFormat, echo_json, get_state
from maulwurf.core import operations
from maulwurf.logs.models import LogLevel
from maulwurf.utils.formatting import console, print_info, print_success, print_warning

app = typer.Typer(
    help="Add to and inspect the debug log.",
    no_args_is_help=True,
)


@app.command("add")
def add(
    ctx: typer.Context,
    level: Annotated[
        LogLevel,
        typer.Argument(help="Log level.", case_sensitive=False),
    ],
    message: Annotated[str, typer.Argument(help="Message text.")],
) -> None:
    """Add a message to the debug log (same filtering as internal messages)."""
    state = get_state(ctx)
    operations.add_log_message(state, level.value, message)

    kept = any(
        entry.level == level.value and entry.message == message
        for entry in operations.get_logs(state)
    )
    if kept:
        print_success(f"Logged [{level.value}] message.")
    else:
        print_info("Message written to the log file but filtered from the debug log.")


@app.command("show")
def show(
    ctx: typer.Context,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Show only the newest N messages."),
    ] = None,
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
    """Show the in-memory debug log of this session."""
    messages = operations.get_logs(get_state(ctx))
    if limit is not None:
        messages = messages[-limit:] if limit > 0 else []

    if output_format == OutputFormat.JSON:
        echo_json([message.to_dict() for message in messages])
        return

    if not messages:
        print_info("No log messages.")
        return

    console.print(create_logs_table(messages))


@app.command("clear")
def clear(ctx: typer.Context) -> None:
    """Clear the in-memory debug log (the log file is kept)."""
    operations.clear_logs(get_state(ctx))
    print_success("Debug log cleared.")


@app.command("path")
def path(ctx: typer.Context) -> None:
    """Print the log file location."""
    sink = get_state(ctx).log_sink
    if sink is None:
        print_warning("Log file is disabled.")
        raise typer.Exit(code=1)
    typer.echo(str(sink.path))
