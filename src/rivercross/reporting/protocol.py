"""Reporter protocol - Interface for formatting search results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rivercross.exploration import SearchResult


@runtime_checkable
class Reporter(Protocol):
    """Protocol for formatting search results.

    All reporters implement this protocol, allowing them to be used
    interchangeably. The report method returns a string that can be
    printed or saved to a file.

    Built-in reporters:
    - ConsoleReporter: Terminal output with ANSI colors
    - JSONReporter: Machine-readable JSON
    """

    def report(self, result: SearchResult) -> str:
        """Format the search result as a string."""
        ...


__all__ = ["Reporter"]
