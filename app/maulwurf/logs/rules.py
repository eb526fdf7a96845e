"""Importance rules for log messages.

Which messages the log store keeps, and which ones are echoed to the
terminal, are business rules rather than parsing. Both are expressed as
ordered rule tables: each rule pairs a predicate with a verdict and the
first matching rule decides. Tables are plain tuples, so a store can be
given a different policy without touching its storage logic.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from maulwurf.logs.models import LogLevel, LogMessage

# Levels that are always kept and always echoed
CRITICAL_LEVELS: frozenset[str] = frozenset(
    {LogLevel.ERROR.value, LogLevel.WARNING.value, LogLevel.FATAL.value}
)

# Substrings marking a message about (re)initialization
INITIALIZATION_MARKERS: tuple[str, ...] = ("initializ", "setup complete")

# Operationally significant keyword classes
KEYWORD_CLASSES: dict[str, tuple[str, ...]] = {
    "interaction": ("input", "click", "select"),
    "file": ("file", "save", "open"),
    "execution": ("run", "start", "stop"),
}


@dataclass(frozen=True, slots=True)
class RuleContext:
    """Everything a rule predicate may look at.

    Attributes:
        level: Lowercased level string.
        message: Message text as supplied.
        stored: Messages currently held by the store.
        init_echoed: Whether an initialization message was already echoed.
    """

    level: str
    message: str
    stored: Sequence[LogMessage] = field(default_factory=tuple)
    init_echoed: bool = False


@dataclass(frozen=True, slots=True)
class Rule:
    """A predicate and the verdict it gives when it matches.

    Attributes:
        name: Identifier reported with the verdict.
        matches: Predicate over the rule context.
        accept: Verdict when the predicate matches.
    """

    name: str
    matches: Callable[[RuleContext], bool]
    accept: bool


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of evaluating a rule table.

    Attributes:
        accept: Whether the message passes.
        rule: Name of the deciding rule ("default" if none matched).
    """

    accept: bool
    rule: str


def is_initialization(message: str) -> bool:
    """Check if a message reports (re)initialization."""
    lowered = message.lower()
    return any(marker in lowered for marker in INITIALIZATION_MARKERS)


def keyword_class(message: str) -> str | None:
    """Find the first operationally significant keyword class in a message.

    Args:
        message: Message text (matched case-insensitively).

    Returns:
        Name of the matching keyword class, or None.
    """
    lowered = message.lower()
    for name, keywords in KEYWORD_CLASSES.items():
        if any(keyword in lowered for keyword in keywords):
            return name
    return None


def _is_critical(ctx: RuleContext) -> bool:
    return ctx.level in CRITICAL_LEVELS


def _is_debug(ctx: RuleContext) -> bool:
    return ctx.level == LogLevel.DEBUG.value


def _is_info(ctx: RuleContext) -> bool:
    return ctx.level == LogLevel.INFO.value


def _is_repeated_initialization(ctx: RuleContext) -> bool:
    if not (_is_info(ctx) and is_initialization(ctx.message)):
        return False
    return any(ctx.message in stored.message for stored in ctx.stored)


def _is_initialization(ctx: RuleContext) -> bool:
    return is_initialization(ctx.message)


def _is_echoed_initialization(ctx: RuleContext) -> bool:
    return ctx.init_echoed and is_initialization(ctx.message)


def _has_keyword(ctx: RuleContext) -> bool:
    return keyword_class(ctx.message) is not None


# Decides which messages the log store keeps
IMPORTANCE_RULES: tuple[Rule, ...] = (
    Rule("critical-level", _is_critical, accept=True),
    Rule("debug-level", _is_debug, accept=False),
    Rule("repeated-initialization", _is_repeated_initialization, accept=False),
    Rule("significant-keyword", _has_keyword, accept=True),
    Rule("info-level", _is_info, accept=True),
)

# Decides which messages are echoed to the terminal
CONSOLE_RULES: tuple[Rule, ...] = (
    Rule("critical-level", _is_critical, accept=True),
    Rule("debug-level", _is_debug, accept=False),
    Rule("echoed-initialization", _is_echoed_initialization, accept=False),
    Rule("first-initialization", _is_initialization, accept=True),
    Rule("significant-keyword", _has_keyword, accept=True),
)


def evaluate(rules: Sequence[Rule], ctx: RuleContext, *, default: bool = False) -> Verdict:
    """Apply a rule table; the first matching rule decides.

    Args:
        rules: Ordered rule table.
        ctx: Message context.
        default: Verdict when no rule matches.

    Returns:
        Verdict with the deciding rule's name.
    """
    for rule in rules:
        if rule.matches(ctx):
            return Verdict(accept=rule.accept, rule=rule.name)
    return Verdict(accept=default, rule="default")
