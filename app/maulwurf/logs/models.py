"""Log message model.

This module defines the log levels and the record kept by the log store
for the debug console.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

# Format shared by stored messages and the log file
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    """Severity of a log message.

    Attributes:
        DEBUG: Developer detail, never kept in the store.
        INFO: Routine event.
        WARNING: Something unexpected that did not fail the operation.
        ERROR: An operation failed.
        FATAL: The process is about to die.
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a moment as local ``YYYY-MM-DD HH:MM:SS``.

    Args:
        moment: Time to format. Defaults to now (local time).

    Returns:
        Formatted timestamp string.
    """
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True, slots=True)
class LogMessage:
    """Single entry of the in-memory log.

    Attributes:
        level: Level string as supplied by the caller.
        message: Message text.
        timestamp: Local time of acceptance (YYYY-MM-DD HH:MM:SS).
    """

    level: str
    message: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary with the level, message and timestamp keys.
        """
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
        }

    def format_line(self) -> str:
        """Format as a log file line without the trailing newline.

        Returns:
            ``[timestamp] [level] message``
        """
        return f"[{self.timestamp}] [{self.level}] {self.message}"
