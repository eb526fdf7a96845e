"""Unit tests for the fonts command."""

import json

from maulwurf.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestFontsCommand:
    """Tests for maulwurf fonts."""

    def test_json(self) -> None:
        """--format json prints the catalog."""
        result = runner.invoke(app, ["-q", "fonts", "--format", "json"])

        assert result.exit_code == 0
        fonts = json.loads(result.stdout)
        assert fonts[0] == "Consolas"
        assert len(fonts) == 12

    def test_marks_current_font(self) -> None:
        """The configured font is marked."""
        runner.invoke(app, ["-q", "settings", "set", "font_family", "Fira Code"])

        result = runner.invoke(app, ["-q", "fonts"])

        assert result.exit_code == 0
        assert "* Fira Code" in result.stdout
        assert "* Consolas" not in result.stdout
