"""In-memory log store for the debug console.

This module provides the LogStore class: a bounded ring buffer of
accepted log messages with duplicate suppression and an importance
filter. The store itself is not synchronised; AppState guards it with
its log lock.
"""

import logging
from collections import deque
from collections.abc import Sequence

from maulwurf.logs.channel import LogChannel
from maulwurf.logs.models import LogMessage, format_timestamp
from maulwurf.logs.rules import (
    CONSOLE_RULES,
    IMPORTANCE_RULES,
    Rule,
    RuleContext,
    evaluate,
    is_initialization,
)

logger = logging.getLogger(__name__)

MAX_MESSAGES = 1000
RECENCY_WINDOW = 10


class LogStore:
    """Bounded, deduplicating, importance-filtered log.

    A message is a duplicate when its (level, message) key is among the
    last ``recency_window`` accepted keys; older history does not count.
    When the buffer is full the oldest message is evicted.

    Attributes:
        init_echoed: Latch set the first time an initialization message
            passes the console gate; it is never reset.
    """

    def __init__(
        self,
        *,
        max_messages: int = MAX_MESSAGES,
        recency_window: int = RECENCY_WINDOW,
        rules: Sequence[Rule] = IMPORTANCE_RULES,
        console_rules: Sequence[Rule] = CONSOLE_RULES,
        channel: LogChannel | None = None,
    ) -> None:
        self._messages: deque[LogMessage] = deque(maxlen=max_messages)
        self._recent: deque[tuple[str, str]] = deque(maxlen=recency_window)
        self._rules = tuple(rules)
        self._console_rules = tuple(console_rules)
        self._channel = channel
        self.init_echoed = False

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def capacity(self) -> int:
        """Maximum number of stored messages."""
        return self._messages.maxlen or 0

    @property
    def recent_keys(self) -> list[tuple[str, str]]:
        """Snapshot of the duplicate suppression window, oldest first."""
        return list(self._recent)

    def add_message(self, level: str, message: str) -> LogMessage | None:
        """Record a message if it is new and important.

        Args:
            level: Level string (matched case-insensitively by the rules).
            message: Message text.

        Returns:
            The stored LogMessage, or None if the message was discarded.
        """
        key = (level, message)
        if key in self._recent:
            return None

        verdict = evaluate(self._rules, self._context(level, message))
        if not verdict.accept:
            logger.debug("Dropped %s message by rule %s", level, verdict.rule)
            return None

        self._recent.append(key)
        entry = LogMessage(level=level, message=message, timestamp=format_timestamp())
        self._messages.append(entry)

        if self._channel is not None:
            self._channel.send(f"[{level}] {message}")

        return entry

    def get_messages(self) -> list[LogMessage]:
        """Return a copy of the stored messages in insertion order."""
        return list(self._messages)

    def clear(self) -> None:
        """Drop all stored messages and the duplicate suppression window."""
        self._messages.clear()
        self._recent.clear()

    def should_echo(self, level: str, message: str) -> bool:
        """Decide whether a message goes to the terminal.

        The first initialization message that passes sets ``init_echoed``,
        which silences every later initialization message.

        Args:
            level: Level string.
            message: Message text.

        Returns:
            True if the message should be echoed.
        """
        verdict = evaluate(self._console_rules, self._context(level, message))
        if verdict.accept and is_initialization(message):
            self.init_echoed = True
        return verdict.accept

    def _context(self, level: str, message: str) -> RuleContext:
        return RuleContext(
            level=level.lower(),
            message=message,
            stored=self._messages,
            init_echoed=self.init_echoed,
        )
