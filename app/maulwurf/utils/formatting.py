"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from maulwurf.core.theme import get_theme

# Styles available for log levels (see get_rich_theme)
_LOG_LEVEL_STYLES = frozenset({"debug", "info", "warning", "error", "fatal"})


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def log_style(level: str) -> str:
    """Get the theme style name for a log level.

    Unknown levels fall back to the plain text style.
    """
    lowered = level.lower()
    return f"log.{lowered}" if lowered in _LOG_LEVEL_STYLES else "text"


def format_log_line(level: str, message: str) -> str:
    """Format a ``[level] message`` line with level color markup.

    Args:
        level: Level string.
        message: Message text (escaped, so brackets are shown literally).

    Returns:
        Rich markup string.
    """
    return f"[{log_style(level)}]\\[{escape(level)}][/] {escape(message)}"


def print_log(level: str, message: str) -> None:
    """Echo a log message to stderr."""
    err_console.print(format_log_line(level, message))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
