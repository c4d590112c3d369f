"""Reporters for schedules and combinations."""

from groupwise.reporters.console import ConsoleReporter, empty_hint
from groupwise.reporters.json import JSONReporter

__all__ = [
    "ConsoleReporter",
    "JSONReporter",
    "empty_hint",
]
