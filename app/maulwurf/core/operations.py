"""Named operations exposed to the editor front end.

Every operation takes the AppState as its first argument. Operations
acquire the lock they need, do their work, release it, and only then
log the outcome, so the log lock and the settings lock are never held
together.

The OPERATIONS registry maps operation names to callables; dispatch()
invokes one by name with keyword arguments and converts the result to
plain JSON-ready data.
"""

import inspect
import logging
from collections.abc import Callable
from functools import cache
from typing import Any, get_type_hints

from pydantic import TypeAdapter, ValidationError

from maulwurf.core.errors import (
    InvalidArgumentsError,
    LockUnavailableError,
    MaulwurfError,
    UnknownOperationError,
)
from maulwurf.core.fonts import get_system_fonts as _font_catalog
from maulwurf.core.state import AppState
from maulwurf.filesystem.lister import is_directory as _is_directory
from maulwurf.filesystem.models import FileEntry
from maulwurf.logs.models import LogMessage
from maulwurf.settings.models import AppSettings

logger = logging.getLogger(__name__)

# Returns True if the settings record changed
SettingsMutation = Callable[[AppSettings], bool]


# =============================================================================
# Filesystem
# =============================================================================


def read_dir(state: AppState, path: str) -> list[FileEntry]:
    """List a directory and remember it as the last visited folder.

    Args:
        state: Application state.
        path: Directory to list.

    Returns:
        Entries in OS enumeration order.

    Raises:
        PathNotFoundError: If the path does not exist.
        NotADirectoryPathError: If the path is not a directory.
        StorageIOError: If the directory cannot be opened.
    """
    entries = state.lister.read_dir(path)
    try:
        update_last_folder_path(state, path)
    except MaulwurfError as e:
        state.log("warning", f"Could not remember last folder {path}: {e}")
    return entries


def is_directory(state: AppState, path: str) -> bool:
    """Check if a path is an existing directory (no logging, never fails)."""
    _ = state
    return _is_directory(path)


def get_dropped_file_path(state: AppState, path: str) -> str:
    """Return a path dropped onto the window unchanged."""
    _ = state
    return path


def greet(state: AppState, name: str) -> str:
    """Build the welcome message shown at startup."""
    _ = state
    return f"Hello, {name}! Welcome to the Maulwurf G-code editor!"


def get_system_fonts(state: AppState) -> list[str]:
    """Return the fixed editor font catalog."""
    _ = state
    return _font_catalog()


# =============================================================================
# Logs
# =============================================================================


def get_logs(state: AppState) -> list[LogMessage]:
    """Snapshot of the in-memory log; empty if the log is unavailable."""
    try:
        with state.log_lock() as store:
            return store.get_messages()
    except LockUnavailableError as e:
        logger.warning("Returning no logs: %s", e)
        return []


def add_log_message(state: AppState, level: str, message: str) -> None:
    """Log a message supplied by the front end (same filtering applies)."""
    state.log(level, message)


def clear_logs(state: AppState) -> None:
    """Empty the in-memory log (the log file is kept)."""
    try:
        with state.log_lock() as store:
            store.clear()
    except LockUnavailableError as e:
        logger.warning("Logs not cleared: %s", e)


# =============================================================================
# Settings
# =============================================================================


def _mutate_settings(state: AppState, description: str, mutate: SettingsMutation) -> None:
    """Apply a change under the settings lock, save, then log the outcome.

    Args:
        state: Application state.
        description: Past-tense description used in the log message.
        mutate: Change to apply to the live record.

    Raises:
        MaulwurfError: If the lock, load or save fails.
    """
    try:
        with state.settings_lock() as store:
            changed = mutate(store.settings)
            store.save()
    except MaulwurfError as e:
        state.log("error", f"Settings not saved ({description}): {e}")
        raise

    if changed:
        state.log("info", f"Settings saved: {description}")
    else:
        logger.debug("Settings unchanged: %s", description)


def get_settings(state: AppState) -> AppSettings:
    """Return a copy of the current settings, loading them if needed.

    Raises:
        LockUnavailableError: If the settings lock is not acquired in time.
        SettingsSerializationError: If the settings file is corrupt.
        StorageIOError: If the settings file cannot be read.
    """
    try:
        with state.settings_lock() as store:
            return store.snapshot()
    except MaulwurfError as e:
        state.log("error", f"Failed to load settings: {e}")
        raise


def update_settings(state: AppState, settings: AppSettings) -> None:
    """Replace the whole settings record and save it.

    The old record is not needed, so this also repairs a corrupt or
    unreadable settings file.
    """
    try:
        with state.settings_lock() as store:
            changed = not store.loaded or store.settings != settings
            store.replace(settings)
            store.save()
    except MaulwurfError as e:
        state.log("error", f"Settings not saved (settings replaced): {e}")
        raise

    if changed:
        state.log("info", "Settings saved: settings replaced")
    else:
        logger.debug("Settings unchanged: settings replaced")


def update_last_folder_path(state: AppState, path: str) -> None:
    """Remember the folder the browser showed last."""

    def mutate(current: AppSettings) -> bool:
        changed = current.last_folder_path != path
        current.last_folder_path = path
        return changed

    _mutate_settings(state, f"last folder {path}", mutate)


def add_favorite_folder(state: AppState, path: str) -> None:
    """Pin a folder; pinning an already pinned folder is a no-op."""
    _mutate_settings(
        state,
        f"favorite folder added {path}",
        lambda current: current.add_favorite_folder(path),
    )


def remove_favorite_folder(state: AppState, path: str) -> None:
    """Unpin a folder; unpinning an unknown folder succeeds silently."""
    _mutate_settings(
        state,
        f"favorite folder removed {path}",
        lambda current: current.remove_favorite_folder(path),
    )


def add_accessible_folder(state: AppState, path: str) -> None:
    """Offer a folder as a browser root; adding it twice is a no-op."""
    _mutate_settings(
        state,
        f"accessible folder added {path}",
        lambda current: current.add_accessible_folder(path),
    )


def remove_accessible_folder(state: AppState, path: str) -> None:
    """Stop offering a folder as a browser root; absent folders are ignored."""
    _mutate_settings(
        state,
        f"accessible folder removed {path}",
        lambda current: current.remove_accessible_folder(path),
    )


def save_settings(state: AppState) -> None:
    """Write the current settings to disk."""
    _mutate_settings(state, "settings written", lambda current: True)


def load_settings(state: AppState) -> AppSettings:
    """Re-read the settings file (defaults if absent) and return a copy.

    Raises:
        LockUnavailableError: If the settings lock is not acquired in time.
        SettingsSerializationError: If the settings file is corrupt.
        StorageIOError: If the settings file cannot be read.
    """
    try:
        with state.settings_lock() as store:
            store.load()
            settings = store.snapshot()
    except MaulwurfError as e:
        state.log("error", f"Failed to load settings: {e}")
        raise
    state.log("info", f"Settings loaded from {state.settings_store.path}")
    return settings


# =============================================================================
# Dispatch
# =============================================================================

OPERATIONS: dict[str, Callable[..., Any]] = {
    "read_dir": read_dir,
    "is_directory": is_directory,
    "get_dropped_file_path": get_dropped_file_path,
    "greet": greet,
    "get_system_fonts": get_system_fonts,
    "get_logs": get_logs,
    "add_log_message": add_log_message,
    "clear_logs": clear_logs,
    "get_settings": get_settings,
    "update_settings": update_settings,
    "update_last_folder_path": update_last_folder_path,
    "add_favorite_folder": add_favorite_folder,
    "remove_favorite_folder": remove_favorite_folder,
    "add_accessible_folder": add_accessible_folder,
    "remove_accessible_folder": remove_accessible_folder,
    "save_settings": save_settings,
    "load_settings": load_settings,
}


def to_jsonable(value: Any) -> Any:
    """Convert an operation result into plain JSON-ready data.

    Args:
        value: Operation result.

    Returns:
        Dicts, lists and scalars only.
    """
    if isinstance(value, FileEntry | LogMessage):
        return value.to_dict()
    if isinstance(value, AppSettings):
        return value.model_dump(mode="json")
    if isinstance(value, list | tuple):
        return [to_jsonable(item) for item in value]
    return value


@cache
def _argument_adapters(name: str) -> dict[str, TypeAdapter[Any]]:
    """Build one validator per keyword argument of an operation."""
    operation = OPERATIONS[name]
    hints = get_type_hints(operation)
    parameters = list(inspect.signature(operation).parameters)[1:]
    return {parameter: TypeAdapter(hints[parameter]) for parameter in parameters}


def dispatch(state: AppState, name: str, args: dict[str, Any] | None = None) -> Any:
    """Invoke an operation by name.

    Arguments are validated against the operation's annotations before
    the call, so a badly typed value never reaches the operation.

    Args:
        state: Application state.
        name: Operation name (key of OPERATIONS).
        args: Keyword arguments for the operation. ``update_settings``
            takes its ``settings`` argument as a plain dict.

    Returns:
        JSON-ready operation result.

    Raises:
        UnknownOperationError: If no operation has that name.
        InvalidArgumentsError: If the arguments don't fit the operation.
        MaulwurfError: Whatever the operation itself raises.
    """
    operation = OPERATIONS.get(name)
    if operation is None:
        raise UnknownOperationError(f"Unknown operation: {name}")

    kwargs = dict(args or {})
    try:
        inspect.signature(operation).bind(state, **kwargs)
    except TypeError as e:
        raise InvalidArgumentsError(f"Invalid arguments for {name}: {e}") from e

    adapters = _argument_adapters(name)
    for key, value in kwargs.items():
        try:
            kwargs[key] = adapters[key].validate_python(value)
        except ValidationError as e:
            raise InvalidArgumentsError(f"Invalid {key} for {name}: {e}") from e

    return to_jsonable(operation(state, **kwargs))
