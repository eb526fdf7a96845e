"""Unit tests for the log notification channel and echo worker."""

import io

import pytest
from maulwurf.core.theme import get_theme
from maulwurf.logs.channel import ECHO_WINDOW_SIZE, ConsoleEchoWorker, LogChannel
from rich.console import Console


@pytest.fixture
def buffer() -> io.StringIO:
    """Capture buffer for console output."""
    return io.StringIO()


@pytest.fixture
def console(buffer: io.StringIO) -> Console:
    """Plain console writing into the buffer."""
    return Console(file=buffer, theme=get_theme(), width=200, color_system=None)


class TestLogChannel:
    """Tests for LogChannel."""

    def test_send_without_subscribers(self) -> None:
        """Sending with nobody listening is not an error."""
        assert LogChannel().send("[info] hello") is False

    def test_broadcast(self) -> None:
        """Every subscriber receives the line."""
        channel = LogChannel()
        first = channel.subscribe()
        second = channel.subscribe()

        assert channel.send("[info] hello") is True
        assert first.get_nowait() == "[info] hello"
        assert second.get_nowait() == "[info] hello"

    def test_full_queue_drops_line(self) -> None:
        """A full subscriber queue drops the line instead of blocking."""
        channel = LogChannel()
        receiver = channel.subscribe(maxsize=1)

        assert channel.send("[info] one") is True
        assert channel.send("[info] two") is False
        assert receiver.qsize() == 1

    def test_unsubscribe(self) -> None:
        """Unsubscribed receivers get nothing more."""
        channel = LogChannel()
        receiver = channel.subscribe()
        channel.unsubscribe(receiver)
        channel.unsubscribe(receiver)

        channel.send("[info] hello")
        assert receiver.empty()
        assert channel.subscriber_count == 0


class TestConsoleEchoWorker:
    """Tests for ConsoleEchoWorker."""

    def test_echoes_forwarded_lines(
        self, console: Console, buffer: io.StringIO
    ) -> None:
        """Lines sent while running are printed before stop returns."""
        channel = LogChannel()
        worker = ConsoleEchoWorker(channel, console)
        worker.start()
        assert worker.running is True

        channel.send("[info] Job started")
        channel.send("[error] Spindle [fault]")
        worker.stop()

        output = buffer.getvalue()
        assert "[info] Job started" in output
        assert "[error] Spindle [fault]" in output
        assert worker.running is False
        assert channel.subscriber_count == 0

    def test_skips_lines_in_window(self, console: Console, buffer: io.StringIO) -> None:
        """A repeated line within the window is printed once."""
        channel = LogChannel()
        worker = ConsoleEchoWorker(channel, console)
        worker.start()
        channel.send("[info] File saved")
        channel.send("[info] File saved")
        worker.stop()

        assert buffer.getvalue().count("[info] File saved") == 1

    def test_window_reseeded_when_full(self, console: Console) -> None:
        """A full window is cleared and reseeded with the current line."""
        worker = ConsoleEchoWorker(LogChannel(), console)
        for i in range(ECHO_WINDOW_SIZE):
            assert worker.should_echo(f"line {i}") is True

        assert worker.should_echo("line 0") is False
        assert worker.should_echo("overflow") is True
        assert worker.should_echo("line 0") is True

    def test_stop_without_start(self, console: Console) -> None:
        """Stopping an idle worker is a no-op."""
        worker = ConsoleEchoWorker(LogChannel(), console)
        worker.stop()
        assert worker.running is False
