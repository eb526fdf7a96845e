"""Process-wide application state.

This module provides the AppState container: one LogStore and one
SettingsStore, each behind its own lock. AppState is built once at
startup and handed to every operation; nothing else keeps a reference
to the stores beyond a single call.

The two locks are never held at the same time. An operation that both
changes settings and logs the outcome releases the settings lock before
it logs.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from maulwurf.core.config import AppConfig
from maulwurf.core.errors import LockUnavailableError
from maulwurf.core.paths import get_data_dir, get_log_path, get_settings_path
from maulwurf.filesystem.lister import DirectoryLister
from maulwurf.logs.channel import LogChannel
from maulwurf.logs.models import LogMessage
from maulwurf.logs.sink import LogFileSink
from maulwurf.logs.store import LogStore
from maulwurf.settings.store import SettingsStore
from maulwurf.utils.formatting import print_log

logger = logging.getLogger(__name__)


class AppState:
    """Container for the shared mutable state of the backend.

    Args:
        config: Tool configuration.
        log_store: In-memory log.
        settings_store: Settings record and its file.
        log_sink: Log file writer (None disables the log file).
        channel: Notification channel the log store forwards to.
        lister: Directory lister (defaults to one logging into this state).
    """

    def __init__(
        self,
        *,
        config: AppConfig,
        log_store: LogStore,
        settings_store: SettingsStore,
        log_sink: LogFileSink | None = None,
        channel: LogChannel | None = None,
        lister: DirectoryLister | None = None,
    ) -> None:
        self.config = config
        self.log_store = log_store
        self.settings_store = settings_store
        self.log_sink = log_sink
        self.channel = channel if channel is not None else LogChannel()
        self.lister = lister if lister is not None else DirectoryLister(log=self.log)
        self._log_lock = threading.Lock()
        self._settings_lock = threading.Lock()

    @classmethod
    def create(cls, config: AppConfig | None = None, data_dir: Path | None = None) -> "AppState":
        """Build the state container with file locations from the config.

        Args:
            config: Tool configuration (defaults apply if None).
            data_dir: Explicit data directory, overriding the config.

        Returns:
            Ready AppState. Settings are loaded lazily on first use.
        """
        config = config if config is not None else AppConfig()
        base_dir = get_data_dir(data_dir if data_dir is not None else config.data_dir)
        channel = LogChannel()
        log_store = LogStore(
            max_messages=config.max_messages,
            recency_window=config.recency_window,
            channel=channel,
        )
        logger.debug("Data directory: %s", base_dir)
        return cls(
            config=config,
            log_store=log_store,
            settings_store=SettingsStore(get_settings_path(base_dir)),
            log_sink=LogFileSink(get_log_path(base_dir)),
            channel=channel,
        )

    @contextmanager
    def log_lock(self) -> Iterator[LogStore]:
        """Hold the log lock.

        Raises:
            LockUnavailableError: If the lock is not acquired in time.
        """
        with self._acquire(self._log_lock, "log"):
            yield self.log_store

    @contextmanager
    def settings_lock(self) -> Iterator[SettingsStore]:
        """Hold the settings lock.

        Raises:
            LockUnavailableError: If the lock is not acquired in time.
        """
        with self._acquire(self._settings_lock, "settings"):
            yield self.settings_store

    @contextmanager
    def _acquire(self, lock: threading.Lock, name: str) -> Iterator[None]:
        if not lock.acquire(timeout=self.config.lock_timeout_seconds):
            raise LockUnavailableError(
                f"{name.capitalize()} state is busy "
                f"(lock not acquired within {self.config.lock_timeout_seconds}s)"
            )
        try:
            yield
        finally:
            lock.release()

    def log(self, level: str, message: str) -> LogMessage | None:
        """Send a message through the log pipeline.

        The store decides whether the message is kept, the log file records
        it according to ``log_file_mode``, and the console gate decides
        whether it is echoed. None of this can fail the caller.

        Args:
            level: Level string.
            message: Message text.

        Returns:
            The stored LogMessage, or None if the store discarded it.
        """
        entry: LogMessage | None = None
        echo = False
        try:
            with self.log_lock() as store:
                entry = store.add_message(level, message)
                echo = self.config.console_echo and store.should_echo(level, message)
        except LockUnavailableError as e:
            logger.warning("Log message dropped: %s", e)

        if self.log_sink is not None and (entry is not None or self.config.log_file_mode == "all"):
            self.log_sink.write(level, message, entry.timestamp if entry is not None else None)

        if echo:
            print_log(level, message)

        return entry
