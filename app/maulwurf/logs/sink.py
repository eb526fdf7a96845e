"""Append-only log file.

Every line is ``[YYYY-MM-DD HH:MM:SS] [level] message``. Logging must
never take the host down, so open and write failures are reported on
standard error and otherwise dropped.
"""

import sys
import threading
from pathlib import Path

from maulwurf.logs.models import format_timestamp


class LogFileSink:
    """Appends formatted log lines to a text file.

    Args:
        path: Log file location. Parent directories are created on demand.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        """Path to the log file."""
        return self._path

    def write(self, level: str, message: str, timestamp: str | None = None) -> bool:
        """Append one entry to the log file.

        Args:
            level: Level string.
            message: Message text.
            timestamp: Preformatted timestamp (defaults to now).

        Returns:
            True if the line was written.
        """
        line = f"[{timestamp or format_timestamp()}] [{level}] {message}\n"
        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with self._path.open(mode="a", encoding="utf-8") as f:
                    f.write(line)
                    f.flush()
            except OSError as e:
                print(f"Failed to write log file {self._path}: {e}", file=sys.stderr)
                return False
        return True
