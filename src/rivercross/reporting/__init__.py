"""Reporters for search results."""

from rivercross.reporting.console import ConsoleReporter
from rivercross.reporting.json import JSONReporter
from rivercross.reporting.protocol import Reporter

__all__ = ["Reporter", "ConsoleReporter", "JSONReporter"]
