"""Fire-and-forget log notification channel.

The log store forwards every accepted message as a ``[level] message``
line. Delivery never blocks the sender: a line nobody is subscribed to,
or that does not fit a subscriber's queue, is dropped.
"""

import logging
import queue
import threading

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

# Default per-subscriber queue size (0 = unbounded)
DEFAULT_QUEUE_SIZE = 1000

# Entries in the echo worker's dedup window before it is reseeded
ECHO_WINDOW_SIZE = 20

_STOP = object()


class LogChannel:
    """Broadcasts log lines to subscriber queues without blocking.

    Thread-safe: subscribe/unsubscribe and send may run on any thread.
    """

    def __init__(self) -> None:
        self._subscribers: list[queue.Queue[object]] = []
        self._lock = threading.Lock()

    def subscribe(self, maxsize: int = DEFAULT_QUEUE_SIZE) -> "queue.Queue[object]":
        """Register a new receiver.

        Args:
            maxsize: Queue capacity (0 = unbounded).

        Returns:
            Queue the forwarded lines arrive on.
        """
        receiver: queue.Queue[object] = queue.Queue(maxsize=maxsize)
        with self._lock:
            self._subscribers.append(receiver)
        return receiver

    def unsubscribe(self, receiver: "queue.Queue[object]") -> None:
        """Remove a receiver; unknown receivers are ignored."""
        with self._lock:
            if receiver in self._subscribers:
                self._subscribers.remove(receiver)

    @property
    def subscriber_count(self) -> int:
        """Number of registered receivers."""
        with self._lock:
            return len(self._subscribers)

    def send(self, line: str) -> bool:
        """Offer a line to every receiver without blocking.

        Args:
            line: Formatted log line.

        Returns:
            True if at least one receiver took the line.
        """
        with self._lock:
            receivers = list(self._subscribers)

        delivered = False
        for receiver in receivers:
            try:
                receiver.put_nowait(line)
                delivered = True
            except queue.Full:
                continue
        return delivered


class ConsoleEchoWorker:
    """Background consumer echoing forwarded log lines to a console.

    Keeps its own dedup window: a line already in the window is skipped;
    once the window holds ECHO_WINDOW_SIZE lines it is cleared and
    reseeded with the current line. Never touches the log store.

    Args:
        channel: Channel to subscribe to.
        console: Rich console to print on.
    """

    def __init__(self, channel: LogChannel, console: Console) -> None:
        self._channel = channel
        self._console = console
        self._receiver: queue.Queue[object] | None = None
        self._thread: threading.Thread | None = None
        self._window: list[str] = []

    @property
    def running(self) -> bool:
        """Whether the consumer thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Subscribe and start the consumer thread (no-op if running)."""
        if self.running:
            return
        self._receiver = self._channel.subscribe(maxsize=0)
        self._thread = threading.Thread(target=self._run, name="maulwurf-log-echo", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 2.0) -> None:
        """Drain pending lines, stop the thread and unsubscribe."""
        if self._receiver is None or self._thread is None:
            return
        self._receiver.put(_STOP)
        self._thread.join(timeout)
        self._channel.unsubscribe(self._receiver)
        self._receiver = None
        self._thread = None

    def should_echo(self, line: str) -> bool:
        """Apply the dedup window to a line, updating the window."""
        if line in self._window:
            return False
        if len(self._window) >= ECHO_WINDOW_SIZE:
            self._window.clear()
        self._window.append(line)
        return True

    def _run(self) -> None:
        receiver = self._receiver
        if receiver is None:
            return
        while True:
            item = receiver.get()
            if item is _STOP:
                return
            line = str(item)
            if self.should_echo(line):
                try:
                    self._console.print(f"[muted]{escape(line)}[/]")
                except OSError as e:
                    logger.debug("Console echo failed: %s", e)
