"""Tool configuration for maulwurf.

This module provides the configuration model and loader for the backend
itself (where files go, how long to wait for locks, what the log file
records). It is separate from the user's editor settings, which live in
the settings store.

Configuration is stored in ~/.config/maulwurf/config.toml
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from maulwurf.core.paths import get_app_config_path

logger = logging.getLogger(__name__)

# Which messages the log file records
LogFileMode = Literal["all", "accepted"]


class AppConfig(BaseModel):
    """Configuration for the maulwurf backend.

    Attributes:
        data_dir: Directory for settings and log files (None = beside executable).
        log_file_mode: "all" writes every logged message to the log file,
            "accepted" only those the log store kept.
        lock_timeout_seconds: How long an operation waits for a state lock.
        console_echo: Echo important log messages to the terminal.
        max_messages: Capacity of the in-memory log.
        recency_window: Number of recent log keys used for duplicate suppression.
    """

    model_config = ConfigDict(extra="forbid")

    data_dir: Annotated[
        Path | None,
        Field(description="Directory for settings and log files"),
    ] = None
    log_file_mode: Annotated[
        LogFileMode,
        Field(description="Messages recorded in the log file"),
    ] = "all"
    lock_timeout_seconds: Annotated[
        float,
        Field(ge=0.1, le=60.0, description="Lock acquisition timeout (0.1-60s)"),
    ] = 5.0
    console_echo: Annotated[
        bool,
        Field(description="Echo important log messages to the terminal"),
    ] = True
    max_messages: Annotated[
        int,
        Field(ge=1, description="In-memory log capacity"),
    ] = 1000
    recency_window: Annotated[
        int,
        Field(ge=1, description="Duplicate suppression window size"),
    ] = 10


class AppConfigError(Exception):
    """Raised when the tool configuration cannot be read or is invalid."""


def load_app_config(path: Path | None = None) -> AppConfig:
    """Load tool configuration from a TOML file.

    A missing file is not an error: the defaults apply.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AppConfig object.

    Raises:
        AppConfigError: If the file cannot be read, has invalid TOML
            syntax, or doesn't match the schema.
    """
    config_path = path or get_app_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise AppConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise AppConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise AppConfigError(f"Invalid config content: {e}") from e
