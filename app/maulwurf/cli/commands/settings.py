"""Settings commands.

Provides `maulwurf settings` subcommands to show and change the editor
settings. Every change is saved immediately.
"""

from collections.abc import Callable
from typing import Annotated

import typer
from pydantic import ValidationError

from maulwurf.cli.display import create_settings_table
from maulwurf.cli.types import OutputFormat, echo_json, get_state
from maulwurf.core import operations
from maulwurf.core.errors import MaulwurfError
from maulwurf.core.state import AppState
from maulwurf.settings.models import AppSettings
from maulwurf.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show and change editor settings.",
    no_args_is_help=True,
)
favorite_app = typer.Typer(help="Manage favorite folders.", no_args_is_help=True)
accessible_app = typer.Typer(help="Manage accessible folders.", no_args_is_help=True)
app.add_typer(favorite_app, name="favorite")
app.add_typer(accessible_app, name="accessible")

# Fields changed through dedicated commands rather than `set`
_LIST_FIELDS = frozenset({"favorite_folders", "accessible_folders"})


def _run(ctx: typer.Context, action: Callable[[AppState], object], done: str) -> None:
    """Run a settings operation, turning errors into exit code 1."""
    try:
        action(get_state(ctx))
    except MaulwurfError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    print_success(done)


@app.command("show")
def show(
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
    """Show the current settings (defaults are written if none exist)."""
    try:
        settings = operations.get_settings(get_state(ctx))
    except MaulwurfError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if output_format == OutputFormat.JSON:
        echo_json(settings.model_dump(mode="json"))
        return

    console.print(create_settings_table(settings))


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Settings key, e.g. font_size.")],
    value: Annotated[str, typer.Argument(help="New value.")],
) -> None:
    """Change a single scalar setting.

    Examples:
        maulwurf settings set font_size 14
        maulwurf settings set word_wrap true
        maulwurf settings set theme light
    """
    if key not in AppSettings.model_fields:
        print_error(f"Unknown settings key: {key}")
        raise typer.Exit(code=1)
    if key in _LIST_FIELDS:
        print_error(f"{key} is a list; use the favorite/accessible commands.")
        raise typer.Exit(code=1)

    state = get_state(ctx)
    try:
        current = operations.get_settings(state)
        updated = AppSettings.model_validate({**current.model_dump(), key: value})
    except MaulwurfError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except ValidationError as e:
        print_error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(code=1) from None

    _run(
        ctx,
        lambda s: operations.update_settings(s, updated),
        f"{key} = {getattr(updated, key)}",
    )


@app.command("reset")
def reset(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Restore all settings to their defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?", default=False):
        raise typer.Exit(code=0)
    _run(ctx, lambda s: operations.update_settings(s, AppSettings()), "Settings reset.")


@app.command("last-folder")
def last_folder(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Folder to remember.")],
) -> None:
    """Set the folder the file browser opens with."""
    _run(
        ctx,
        lambda s: operations.update_last_folder_path(s, path),
        f"Last folder: {path}",
    )


@app.command("path")
def settings_path(ctx: typer.Context) -> None:
    """Print the settings file location."""
    typer.echo(str(get_state(ctx).settings_store.path))


@favorite_app.command("add")
def favorite_add(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Folder to pin.")],
) -> None:
    """Add a favorite folder (no-op if already present)."""
    _run(ctx, lambda s: operations.add_favorite_folder(s, path), f"Favorite: {path}")


@favorite_app.command("remove")
def favorite_remove(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Folder to unpin.")],
) -> None:
    """Remove a favorite folder (no-op if absent)."""
    _run(
        ctx,
        lambda s: operations.remove_favorite_folder(s, path),
        f"Not a favorite: {path}",
    )


@accessible_app.command("add")
def accessible_add(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Folder to offer as a browser root.")],
) -> None:
    """Add an accessible folder (no-op if already present)."""
    _run(ctx, lambda s: operations.add_accessible_folder(s, path), f"Accessible: {path}")


@accessible_app.command("remove")
def accessible_remove(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Folder to stop offering.")],
) -> None:
    """Remove an accessible folder (no-op if absent)."""
    _run(
        ctx,
        lambda s: operations.remove_accessible_folder(s, path),
        f"Not accessible: {path}",
    )
