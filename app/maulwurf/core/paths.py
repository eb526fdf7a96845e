"""Path management for maulwurf.

Two kinds of locations are used:

- Data files (settings and the log file) live beside the running
  executable, like the desktop shell always did. ``MAULWURF_HOME`` or the
  ``data_dir`` config key moves them elsewhere.
- Tool configuration (config.toml, theme.toml) follows the XDG Base
  Directory Specification: ~/.config/maulwurf/
"""

import os
import sys
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "maulwurf"

# Environment variable overriding the data directory
HOME_ENV_VAR = "MAULWURF_HOME"

SETTINGS_FILENAME = "maulwurf_settings.json"
LOG_FILENAME = "maulwurf_log.txt"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/maulwurf/ (or XDG_CONFIG_HOME/maulwurf/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_app_config_path() -> Path:
    """Get the tool configuration file path.

    Returns:
        Path to ~/.config/maulwurf/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_executable_dir() -> Path:
    """Get the directory of the running executable.

    A frozen build reports its own binary through ``sys.executable``.
    Otherwise the launched script (``sys.argv[0]``) is the executable,
    which for an installed console script is the environment's bin dir.

    Returns:
        Directory containing the running executable.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def get_data_dir(override: Path | None = None) -> Path:
    """Get the directory holding the settings and log files.

    Priority: ``MAULWURF_HOME`` environment variable, then the configured
    override, then the executable directory.

    Args:
        override: Directory from the tool configuration, if any.

    Returns:
        Path to the data directory.
    """
    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        return Path(env_home)
    if override is not None:
        return override
    return get_executable_dir()


def get_settings_path(data_dir: Path | None = None) -> Path:
    """Get the settings file path.

    Returns:
        Path to <data dir>/maulwurf_settings.json.
    """
    return get_data_dir(data_dir) / SETTINGS_FILENAME


def get_log_path(data_dir: Path | None = None) -> Path:
    """Get the log file path.

    Returns:
        Path to <data dir>/maulwurf_log.txt.
    """
    return get_data_dir(data_dir) / LOG_FILENAME
