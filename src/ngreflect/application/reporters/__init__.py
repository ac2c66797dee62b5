"""Reporters for recovered decorated classes."""

from ngreflect.application.reporters._base import BaseReporter
from ngreflect.application.reporters.console import ConsoleConfig, ConsoleReporter
from ngreflect.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
