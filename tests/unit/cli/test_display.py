"""Unit tests for the shared display helpers."""

import io

from maulwurf.cli.display import create_entries_table, create_logs_table, create_settings_table
from maulwurf.core.theme import get_theme
from maulwurf.filesystem.models import FileEntry
from maulwurf.logs.models import LogMessage
from maulwurf.settings.models import AppSettings
from maulwurf.utils.formatting import format_log_line, log_style
from rich.console import Console
from rich.table import Table


def _render(table: Table) -> str:
    buffer = io.StringIO()
    Console(file=buffer, theme=get_theme(), width=120, color_system=None).print(table)
    return buffer.getvalue()


class TestEntriesTable:
    """Tests for create_entries_table function."""

    def test_folders_first(self) -> None:
        """Folders are listed before files."""
        entries = [
            FileEntry(name="a.nc", path="/x/a.nc", is_dir=False, hidden=False),
            FileEntry(name="zeta", path="/x/zeta", is_dir=True, hidden=False),
        ]

        output = _render(create_entries_table(entries, title="/x"))

        assert output.index("zeta") < output.index("a.nc")

    def test_hidden_marker(self) -> None:
        """Hidden entries are marked."""
        entries = [FileEntry(name="secret", path="/x/secret", is_dir=False, hidden=True)]
        assert "yes" in _render(create_entries_table(entries, title="/x"))


class TestLogsTable:
    """Tests for create_logs_table function."""

    def test_brackets_shown_literally(self) -> None:
        """Markup-like text in messages is not interpreted."""
        messages = [
            LogMessage(level="error", message="bad [bold]token", timestamp="2026-01-01 00:00:00")
        ]
        output = _render(create_logs_table(messages))
        assert "bad [bold]token" in output
        assert "2026-01-01 00:00:00" in output


class TestSettingsTable:
    """Tests for create_settings_table function."""

    def test_rows(self) -> None:
        """Every settings key becomes a row."""
        output = _render(create_settings_table(AppSettings(favorite_folders=["/jobs"])))
        assert "favorite_folders" in output
        assert "/jobs" in output
        assert "accessible_folders" in output


class TestLogFormatting:
    """Tests for log line formatting helpers."""

    def test_log_style(self) -> None:
        """Known levels map to their style, others to text."""
        assert log_style("ERROR") == "log.error"
        assert log_style("trace") == "text"

    def test_format_log_line(self) -> None:
        """The level bracket is escaped."""
        assert format_log_line("info", "hi") == "[log.info]\\[info][/] hi"
