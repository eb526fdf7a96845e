"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from maulwurf.core.config import AppConfig
from maulwurf.core.state import AppState


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the data and config directories into the test's tmp_path."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("MAULWURF_HOME", str(data_dir))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return data_dir


@pytest.fixture
def data_dir(isolated_dirs: Path) -> Path:
    """Directory holding the settings and log files during a test."""
    return isolated_dirs


@pytest.fixture
def app_config() -> AppConfig:
    """Quiet configuration with a short lock timeout."""
    return AppConfig(console_echo=False, lock_timeout_seconds=0.1)


@pytest.fixture
def state(app_config: AppConfig) -> AppState:
    """Fresh application state backed by the test data directory."""
    return AppState.create(app_config)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with two files and one subdirectory."""
    root = tmp_path / "tree"
    root.mkdir()
    (root / "part.nc").write_text("G0 X0 Y0\n", encoding="utf-8")
    (root / ".hidden.nc").write_text("G1 X1\n", encoding="utf-8")
    (root / "jobs").mkdir()
    return root
