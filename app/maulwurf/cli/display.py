"""Shared Rich display functions for entries, logs and settings.

Provides reusable table builders for the ls, logs and settings commands.
"""

from rich.markup import escape
from rich.table import Table

from maulwurf.filesystem.models import FileEntry
from maulwurf.logs.models import LogMessage
from maulwurf.settings.models import AppSettings
from maulwurf.utils.formatting import log_style


def create_entries_table(entries: list[FileEntry], title: str) -> Table:
    """Create a Rich table listing directory entries.

    Folders come first, then files, each group by name; the lister itself
    returns OS order.

    Args:
        entries: Entries to display.
        title: Table title (usually the listed path).

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=escape(title),
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Type", width=6)
    table.add_column("Name", no_wrap=True)
    table.add_column("Hidden", width=6, justify="center")

    for entry in sorted(entries, key=lambda e: (not e.is_dir, e.name.lower())):
        if entry.hidden:
            style = "entry.hidden"
        elif entry.is_dir:
            style = "entry.folder"
        else:
            style = "entry.file"
        table.add_row(
            "dir" if entry.is_dir else "file",
            f"[{style}]{escape(entry.name)}[/]",
            "yes" if entry.hidden else "",
        )

    return table


def create_logs_table(messages: list[LogMessage]) -> Table:
    """Create a Rich table of log messages, oldest first.

    Args:
        messages: Messages to display.

    Returns:
        Rich Table configured for log display.
    """
    table = Table(
        title="Debug Log",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Timestamp", style="muted", no_wrap=True)
    table.add_column("Level", width=8)
    table.add_column("Message")

    for message in messages:
        style = log_style(message.level)
        table.add_row(
            message.timestamp,
            f"[{style}]{escape(message.level)}[/]",
            escape(message.message),
        )

    return table


def create_settings_table(settings: AppSettings) -> Table:
    """Create a Rich key/value table of the settings record.

    Args:
        settings: Settings to display.

    Returns:
        Rich Table with one row per field.
    """
    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="info", no_wrap=True)
    table.add_column("Value")

    for key, value in settings.model_dump(mode="json").items():
        if isinstance(value, list):
            shown = escape("\n".join(str(item) for item in value)) if value else "[muted]-[/]"
        else:
            shown = escape(str(value))
        table.add_row(key, shown)

    return table
