"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import maulwurf.core.theme as theme_module
import pytest
from maulwurf.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    get_user_theme_path,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has defaults for every log level."""
        colors = ThemeColors()
        assert colors.log_error == "#ff5555"
        assert colors.folder == "#dcb67a"

    def test_short_hex_accepted(self) -> None:
        """#RGB colors are accepted."""
        assert ThemeColors(text="#abc").text == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_unknown_key(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(sparkle="#ffffff")  # type: ignore[call-arg]


class TestLoadTheme:
    """Tests for theme file loading."""

    def test_bundled_theme_matches_defaults(self) -> None:
        """The bundled theme file parses to the model defaults."""
        colors = _load_toml_colors(Path(get_bundled_theme_path()))
        assert colors is not None
        assert ThemeColors(**colors) == ThemeColors()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file yields None."""
        assert _load_toml_colors(tmp_path / "none.toml") is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML yields None."""
        path = tmp_path / "theme.toml"
        path.write_text("[colors\n", encoding="utf-8")
        assert _load_toml_colors(path) is None

    def test_user_override(self) -> None:
        """User colors override single keys of the bundled theme."""
        path = get_user_theme_path()
        path.parent.mkdir(parents=True)
        path.write_text('[colors]\nfolder = "#123456"\n', encoding="utf-8")

        colors = load_theme()

        assert colors.folder == "#123456"
        assert colors.file == ThemeColors().file

    def test_invalid_user_override_falls_back(self) -> None:
        """An invalid user theme falls back to the defaults."""
        path = get_user_theme_path()
        path.parent.mkdir(parents=True)
        path.write_text('[colors]\nfolder = "yellow"\n', encoding="utf-8")

        assert load_theme() == ThemeColors()


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_log_level_styles(self) -> None:
        """Every log level has a style."""
        theme = get_rich_theme(ThemeColors())
        for level in ("debug", "info", "warning", "error", "fatal"):
            assert f"log.{level}" in theme.styles

    def test_entry_styles(self) -> None:
        """File browser styles are present."""
        theme = get_rich_theme(ThemeColors())
        assert {"entry.folder", "entry.file", "entry.hidden"} <= set(theme.styles)

    def test_get_theme_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """get_theme builds the theme once."""
        monkeypatch.setattr(theme_module, "_cached_theme", None)
        first = get_theme()
        assert isinstance(first, Theme)
        assert get_theme() is first
