"""State - Immutable snapshots of the river-crossing world."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rivercross.errors import InvalidTotalError
from rivercross.world.moves import Load, move_table
from rivercross.world.rules import DEFAULT_RULES, GoalMode, Rules


class BoatSide(str, Enum):
    """Which bank the boat is moored at."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> BoatSide:
        return BoatSide.RIGHT if self is BoatSide.LEFT else BoatSide.LEFT


@dataclass(frozen=True)
class Bank:
    """People standing on one bank of the river."""

    cannibals: int
    missionaries: int

    def is_overrun(self) -> bool:
        """True when cannibals outnumber a non-empty group of missionaries."""
        return self.cannibals > self.missionaries and self.missionaries > 0

    def send(self, load: Load) -> Bank:
        return Bank(self.cannibals - load.cannibals, self.missionaries - load.missionaries)

    def receive(self, load: Load) -> Bank:
        return Bank(self.cannibals + load.cannibals, self.missionaries + load.missionaries)


@dataclass(frozen=True)
class CrossingState:
    """Snapshot of both banks and the boat.

    Construction validates the world totals: each resource summed over
    both banks must equal the total fixed by ``rules``, and no count may be
    negative. An invalid configuration raises InvalidTotalError.

    State identity is the bank counts plus the boat side. ``rules`` is
    carried along so successors inherit it, but it takes no part in
    equality or the canonical key.

    Provenance (parent and move) is not stored here; the search graph
    records it per node, so one state value may appear in many chains.

    Attributes:
        left: People on the left bank.
        right: People on the right bank.
        boat: Bank the boat is at.
        rules: World totals, boat capacity and goal mode.
    """

    left: Bank
    right: Bank
    boat: BoatSide
    rules: Rules = field(default=DEFAULT_RULES, compare=False, repr=False)

    def __post_init__(self) -> None:
        for bank in (self.left, self.right):
            if bank.cannibals < 0:
                raise InvalidTotalError("cannibals", bank.cannibals, 0,
                                        message=f"Negative number of cannibals: {bank.cannibals}")
            if bank.missionaries < 0:
                raise InvalidTotalError("missionaries", bank.missionaries, 0,
                                        message=f"Negative number of missionaries: {bank.missionaries}")

        total_cannibals = self.left.cannibals + self.right.cannibals
        if total_cannibals != self.rules.total_cannibals:
            raise InvalidTotalError("cannibals", total_cannibals, self.rules.total_cannibals)

        total_missionaries = self.left.missionaries + self.right.missionaries
        if total_missionaries != self.rules.total_missionaries:
            raise InvalidTotalError("missionaries", total_missionaries, self.rules.total_missionaries)

    @classmethod
    def from_counts(
        cls,
        left_cannibals: int,
        left_missionaries: int,
        right_cannibals: int,
        right_missionaries: int,
        boat: BoatSide | str,
        rules: Rules = DEFAULT_RULES,
    ) -> CrossingState:
        """Build and validate a state from raw counts.

        Raises:
            InvalidTotalError: If the counts do not match the world totals.
        """
        return cls(
            left=Bank(left_cannibals, left_missionaries),
            right=Bank(right_cannibals, right_missionaries),
            boat=BoatSide(boat),
            rules=rules,
        )

    @property
    def boat_bank(self) -> Bank:
        """The bank the boat is currently at."""
        return self.left if self.boat is BoatSide.LEFT else self.right

    def loads(self) -> tuple[Load, ...]:
        """Loads that can leave the boat's bank."""
        table = move_table(
            self.rules.total_cannibals,
            self.rules.total_missionaries,
            self.rules.boat_capacity,
        )
        bank = self.boat_bank
        return table[(bank.cannibals, bank.missionaries)]

    def apply(self, load: Load) -> CrossingState:
        """Row ``load`` from the boat's bank to the other one.

        Raises:
            InvalidTotalError: If the resulting configuration is impossible.
        """
        if self.boat is BoatSide.LEFT:
            left, right = self.left.send(load), self.right.receive(load)
        else:
            left, right = self.left.receive(load), self.right.send(load)
        return CrossingState(left=left, right=right, boat=self.boat.other, rules=self.rules)

    def iter_moves(self) -> Iterator[tuple[Load, CrossingState | InvalidTotalError]]:
        """Yield each legal load with the state it produces (or why it could not)."""
        for load in self.loads():
            try:
                yield load, self.apply(load)
            except InvalidTotalError as e:
                yield load, e

    def successors(self) -> list[CrossingState | InvalidTotalError]:
        """One candidate per legal crossing from the boat's bank.

        Each candidate is validated on its own. A candidate that fails
        validation is returned as its InvalidTotalError instead of being
        raised, so callers decide how to treat a generator bug.
        """
        return [child for _, child in self.iter_moves()]

    def is_goal(self) -> bool:
        if self.rules.goal is GoalMode.EVERYONE:
            return (
                self.left.missionaries == self.rules.total_missionaries
                and self.left.cannibals == self.rules.total_cannibals
            )
        return self.left.missionaries == self.rules.total_missionaries

    def is_failure(self) -> bool:
        """True when missionaries are outnumbered on either bank."""
        return self.left.is_overrun() or self.right.is_overrun()

    def heuristic(self) -> int:
        """Missionaries still missing from the left bank.

        Lower is closer to the goal. One boat trip can move two
        missionaries, so this is not a strict lower bound on remaining
        crossings and A* ordered by it is only approximately optimal.
        """
        return self.rules.total_missionaries - self.left.missionaries

    def canonical_key(self) -> str:
        """Five-token identity: ``"<lc> <lm> <rc> <rm> <left|right>"``."""
        return (
            f"{self.left.cannibals} {self.left.missionaries} "
            f"{self.right.cannibals} {self.right.missionaries} {self.boat.value}"
        )

    def describe_move_from(self, parent: CrossingState) -> str:
        """Human-readable label for the crossing that turned ``parent`` into this state.

        Raises:
            ValueError: If this state is not exactly one legal crossing away.
        """
        if parent.boat is self.boat:
            raise ValueError(
                f"{self.canonical_key()!r} is not one crossing from {parent.canonical_key()!r}"
            )
        origin = parent.boat_bank
        remaining = self.left if parent.boat is BoatSide.LEFT else self.right
        load = Load(
            origin.cannibals - remaining.cannibals,
            origin.missionaries - remaining.missionaries,
        )
        if load not in parent.loads():
            raise ValueError(
                f"{self.canonical_key()!r} is not one crossing from {parent.canonical_key()!r}"
            )
        return (
            f"send {load.cannibals} cannibals and {load.missionaries} missionaries "
            f"to the {self.boat.value} side"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": {"cannibals": self.left.cannibals, "missionaries": self.left.missionaries},
            "right": {"cannibals": self.right.cannibals, "missionaries": self.right.missionaries},
            "boat": self.boat.value,
        }

    def __str__(self) -> str:
        return self.canonical_key()


__all__ = ["BoatSide", "Bank", "CrossingState"]
