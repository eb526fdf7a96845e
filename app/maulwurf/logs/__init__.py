"""Diagnostic log for the debug console.

This module exports the log store, its rule tables, the notification
channel and the log file sink.
"""

from maulwurf.logs.channel import ConsoleEchoWorker, LogChannel
from maulwurf.logs.models import LogLevel, LogMessage, format_timestamp
from maulwurf.logs.rules import CONSOLE_RULES, IMPORTANCE_RULES, Rule, RuleContext, evaluate
from maulwurf.logs.sink import LogFileSink
from maulwurf.logs.store import LogStore

__all__ = [
    "CONSOLE_RULES",
    "IMPORTANCE_RULES",
    "ConsoleEchoWorker",
    "LogChannel",
    "LogFileSink",
    "LogLevel",
    "LogMessage",
    "LogStore",
    "Rule",
    "RuleContext",
    "evaluate",
    "format_timestamp",
]
