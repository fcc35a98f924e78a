"""Rules - The fixed parameters of one river-crossing world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GoalMode(str, Enum):
    """Which configuration counts as solved.

    MISSIONARIES: every missionary is on the left bank; cannibals and the
        boat may be anywhere.
    EVERYONE: every missionary and every cannibal is on the left bank.
    """

    MISSIONARIES = "missionaries"
    EVERYONE = "everyone"


@dataclass(frozen=True)
class Rules:
    """World totals, boat capacity and goal mode.

    Attributes:
        total_cannibals: Cannibals across both banks.
        total_missionaries: Missionaries across both banks.
        boat_capacity: Maximum people per crossing (at least one always rows).
        goal: Which configuration counts as solved.
    """

    total_cannibals: int = 3
    total_missionaries: int = 3
    boat_capacity: int = 2
    goal: GoalMode = GoalMode.MISSIONARIES

    def __post_init__(self) -> None:
        if self.total_cannibals < 0 or self.total_missionaries < 0:
            raise ValueError("world totals must be non-negative")
        if self.boat_capacity < 1:
            raise ValueError(f"boat_capacity must be at least 1, got {self.boat_capacity}")


DEFAULT_RULES = Rules()


__all__ = ["GoalMode", "Rules", "DEFAULT_RULES"]
