"""Unit tests for path management.

Tests for the data directory resolution and the XDG config directory.
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from maulwurf.core.paths import (
    APP_NAME,
    HOME_ENV_VAR,
    LOG_FILENAME,
    SETTINGS_FILENAME,
    get_app_config_path,
    get_config_dir,
    get_data_dir,
    get_executable_dir,
    get_log_path,
    get_settings_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_app_config_path(self, tmp_path: Path) -> None:
        """The tool configuration is config.toml in the config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_app_config_path() == tmp_path / APP_NAME / "config.toml"


class TestGetDataDir:
    """Tests for get_data_dir function."""

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """MAULWURF_HOME overrides the configured directory."""
        monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path / "env"))
        assert get_data_dir(tmp_path / "configured") == tmp_path / "env"

    def test_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The configured directory is used without MAULWURF_HOME."""
        monkeypatch.delenv(HOME_ENV_VAR, raising=False)
        assert get_data_dir(tmp_path / "configured") == tmp_path / "configured"

    def test_executable_dir_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without overrides, files live beside the executable."""
        monkeypatch.delenv(HOME_ENV_VAR, raising=False)
        assert get_data_dir() == get_executable_dir()


class TestGetExecutableDir:
    """Tests for get_executable_dir function."""

    def test_frozen_build(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A frozen build uses the directory of its binary."""
        binary = tmp_path / "maulwurf.exe"
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(binary))

        assert get_executable_dir() == tmp_path.resolve()

    def test_script(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A script install uses the directory of the launched script."""
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "maulwurf")])

        assert get_executable_dir() == tmp_path.resolve()

    def test_no_argv(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without argv the working directory is used."""
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setattr(sys, "argv", [])

        assert get_executable_dir() == Path.cwd()


class TestDataFiles:
    """Tests for settings and log file paths."""

    def test_settings_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The settings file is maulwurf_settings.json in the data dir."""
        monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))
        assert get_settings_path() == tmp_path / SETTINGS_FILENAME
        assert SETTINGS_FILENAME == "maulwurf_settings.json"

    def test_log_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The log file is maulwurf_log.txt in the data dir."""
        monkeypatch.delenv(HOME_ENV_VAR, raising=False)
        assert get_log_path(tmp_path) == tmp_path / LOG_FILENAME
        assert LOG_FILENAME == "maulwurf_log.txt"
