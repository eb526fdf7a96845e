"""Unit tests for the importance and console rule tables."""

import pytest
from maulwurf.logs.models import LogMessage
from maulwurf.logs.rules import (
    CONSOLE_RULES,
    IMPORTANCE_RULES,
    Rule,
    RuleContext,
    evaluate,
    is_initialization,
    keyword_class,
)


def _stored(*messages: str) -> tuple[LogMessage, ...]:
    return tuple(
        LogMessage(level="info", message=message, timestamp="2026-01-01 00:00:00")
        for message in messages
    )


class TestHelpers:
    """Tests for message classification helpers."""

    @pytest.mark.parametrize(
        "message",
        ["App initialized", "Initializing editor", "Backend SETUP COMPLETE"],
    )
    def test_initialization_messages(self, message: str) -> None:
        """Initialization markers match case-insensitively."""
        assert is_initialization(message) is True

    def test_not_initialization(self) -> None:
        """Ordinary messages are not initialization messages."""
        assert is_initialization("Directory read: /jobs (3 entries)") is False

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("User Input received", "interaction"),
            ("click on toolbar", "interaction"),
            ("Selected line 4", "interaction"),
            ("Saved part.nc", "file"),
            ("OPEN dialog", "file"),
            ("Job started", "execution"),
            ("Stop requested", "execution"),
            ("Nothing to see", None),
        ],
    )
    def test_keyword_class(self, message: str, expected: str | None) -> None:
        """Keyword classes match as case-insensitive substrings."""
        assert keyword_class(message) == expected


class TestImportanceRules:
    """Tests for IMPORTANCE_RULES."""

    @pytest.mark.parametrize("level", ["error", "warning", "fatal"])
    def test_critical_levels_accepted(self, level: str) -> None:
        """Critical levels are always kept."""
        verdict = evaluate(IMPORTANCE_RULES, RuleContext(level=level, message="anything"))
        assert verdict.accept is True
        assert verdict.rule == "critical-level"

    def test_debug_rejected(self) -> None:
        """Debug messages are never kept, even with keywords."""
        verdict = evaluate(IMPORTANCE_RULES, RuleContext(level="debug", message="file saved"))
        assert verdict.accept is False
        assert verdict.rule == "debug-level"

    def test_first_initialization_accepted(self) -> None:
        """An initialization message not yet stored is kept."""
        ctx = RuleContext(level="info", message="App initialized", stored=())
        assert evaluate(IMPORTANCE_RULES, ctx).accept is True

    def test_repeated_initialization_rejected(self) -> None:
        """An initialization message contained in a stored message is dropped."""
        ctx = RuleContext(
            level="info",
            message="App initialized",
            stored=_stored("App initialized successfully"),
        )
        verdict = evaluate(IMPORTANCE_RULES, ctx)
        assert verdict.accept is False
        assert verdict.rule == "repeated-initialization"

    def test_keyword_accepted_for_unknown_level(self) -> None:
        """A significant keyword keeps a message of any non-debug level."""
        ctx = RuleContext(level="trace", message="Program started")
        verdict = evaluate(IMPORTANCE_RULES, ctx)
        assert verdict.accept is True
        assert verdict.rule == "significant-keyword"

    def test_plain_info_accepted(self) -> None:
        """Info messages are kept."""
        ctx = RuleContext(level="info", message="Theme changed")
        assert evaluate(IMPORTANCE_RULES, ctx).rule == "info-level"

    def test_unknown_level_without_keyword_rejected(self) -> None:
        """Unknown levels without keywords fall through to the default."""
        verdict = evaluate(IMPORTANCE_RULES, RuleContext(level="trace", message="tick"))
        assert verdict.accept is False
        assert verdict.rule == "default"


class TestConsoleRules:
    """Tests for CONSOLE_RULES."""

    def test_critical_echoed(self) -> None:
        """Critical messages are echoed."""
        ctx = RuleContext(level="error", message="boom")
        assert evaluate(CONSOLE_RULES, ctx).accept is True

    def test_debug_not_echoed(self) -> None:
        """Debug messages are never echoed."""
        ctx = RuleContext(level="debug", message="file saved")
        assert evaluate(CONSOLE_RULES, ctx).accept is False

    def test_initialization_echoed_once(self) -> None:
        """Initialization is echoed until the latch is set."""
        first = RuleContext(level="info", message="App initialized", init_echoed=False)
        later = RuleContext(level="info", message="App initialized", init_echoed=True)
        assert evaluate(CONSOLE_RULES, first).accept is True
        assert evaluate(CONSOLE_RULES, later).accept is False

    def test_keyword_echoed(self) -> None:
        """Significant keywords are echoed."""
        ctx = RuleContext(level="info", message="File saved")
        assert evaluate(CONSOLE_RULES, ctx).accept is True

    def test_plain_info_not_echoed(self) -> None:
        """Plain info stays off the console."""
        ctx = RuleContext(level="info", message="Theme changed")
        assert evaluate(CONSOLE_RULES, ctx).accept is False


class TestEvaluate:
    """Tests for evaluate function."""

    def test_first_match_wins(self) -> None:
        """The first matching rule decides."""
        rules = (
            Rule("always-no", lambda ctx: True, accept=False),
            Rule("always-yes", lambda ctx: True, accept=True),
        )
        verdict = evaluate(rules, RuleContext(level="info", message="x"))
        assert verdict.accept is False
        assert verdict.rule == "always-no"

    def test_default(self) -> None:
        """An empty table returns the default verdict."""
        verdict = evaluate((), RuleContext(level="info", message="x"), default=True)
        assert verdict.accept is True
        assert verdict.rule == "default"
