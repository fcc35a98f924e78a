"""Console reporter for terminal output."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING, TextIO

from rivercross.exploration.result import SearchStatus
from rivercross.world import GoalMode

if TYPE_CHECKING:
    from rivercross.exploration import SearchResult


class ConsoleReporter:
    """Formats SearchResult for terminal output.

    Example::

        reporter = ConsoleReporter()
        print(reporter.report(result))

        # Disable colors for file output
        reporter = ConsoleReporter(color=False)
        with open("solution.txt", "w") as f:
            f.write(reporter.report(result))
    """

    # ANSI color codes
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    BOX_TL = "┌"
    BOX_TR = "┐"
    BOX_BL = "└"
    BOX_BR = "┘"
    BOX_H = "─"
    BOX_V = "│"

    WIDTH = 60

    def __init__(self, file: TextIO | None = None, color: bool = True) -> None:
        """Initialize the console reporter.

        Args:
            file: Output file for print_report() (default: stdout).
            color: Whether to use ANSI colors (default: True).
        """
        self.file = file or sys.stdout
        self.color = color

    def _c(self, text: str, code: str) -> str:
        """Apply color if enabled."""
        if self.color:
            return f"{code}{text}{self.RESET}"
        return text

    def report(self, result: SearchResult) -> str:
        """Format the search result as a string."""
        buffer = io.StringIO()
        self._write_report(result, buffer)
        return buffer.getvalue()

    def print_report(self, result: SearchResult) -> None:
        """Write the formatted result to the configured file."""
        self.file.write(self.report(result))

    def _write_report(self, result: SearchResult, buffer: io.StringIO) -> None:
        def line(text: str = "") -> None:
            buffer.write(text + "\n")

        line()
        if result.found:
            icon = self._c("✓", self.GREEN)
            status = self._c(f"SOLVED in {result.move_count} moves", self.GREEN + self.BOLD)
        elif result.status is SearchStatus.TRUNCATED:
            icon = self._c("!", self.YELLOW)
            status = self._c("STOPPED at expansion limit", self.YELLOW + self.BOLD)
        else:
            icon = self._c("✗", self.RED)
            status = self._c("NO SOLUTION", self.RED + self.BOLD)

        line(f"  {icon} {result.strategy.label} search: {status}")
        line(self._c("  " + self.BOX_H * self.WIDTH, self.DIM))
        line()

        summary_parts = [
            f"from {result.initial_key!r}",
            f"{result.states_visited} visited",
            f"{result.states_generated} generated",
            f"{result.duration_ms:.2f}ms",
        ]
        line(f"  {self._c('Summary:', self.BOLD)} {' | '.join(summary_parts)}")
        line()

        if result.found:
            keys = result.path_keys
            inner = self.WIDTH - 2
            line(f"  {self.BOX_TL}{self.BOX_H * inner}{self.BOX_TR}")
            for index, (step, key) in enumerate(zip(result.steps, keys)):
                label = self._c(f"{index:>2}.", self.DIM)
                line(f"  {self.BOX_V} {label} {step}")
                line(f"  {self.BOX_V}     {self._c(key, self.CYAN)}")
            line(f"  {self.BOX_BL}{self.BOX_H * inner}{self.BOX_BR}")
            line()

        line(self._c("  " + self.BOX_H * self.WIDTH, self.DIM))
        if result.found:
            line(f"  {self._c(self._goal_message(result), self.GREEN)}")
        elif result.status is SearchStatus.TRUNCATED:
            line(f"  {self._c('Raise --max-expansions to keep searching.', self.YELLOW)}")
        else:
            line(f"  {self._c('Every reachable state was explored.', self.RED)}")
        line()

    def _goal_message(self, result: SearchResult) -> str:
        if result.goal is not None and result.goal.state.rules.goal is GoalMode.EVERYONE:
            return "Everyone made it across."
        return "All missionaries made it across."


__all__ = ["ConsoleReporter"]
