"""Frontier - Manages states scheduled but not yet expanded.

The Frontier is the key abstraction for search strategies.
It holds the states that have been discovered but not yet explored.

Different frontier implementations give different search behaviors:
- QueueFrontier (FIFO): BFS - explores breadth-first, guarantees fewest crossings
- StackFrontier (LIFO): DFS - explores depth-first, no shortest-path guarantee
- HeuristicFrontier: Greedy best-first - smallest heuristic first
- AStarFrontier: A* - smallest heuristic + depth first

Frontiers never drop or merge entries. Duplicate states are filtered
upstream by the VisitedSet.
"""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rivercross.world import CrossingState


@dataclass(frozen=True)
class FrontierEntry:
    """A scheduled state and where it sits in the search graph.

    Attributes:
        handle: Graph node handle of the state.
        state: The state itself.
        depth: Number of crossings from the root (the path cost so far).
    """

    handle: int
    state: CrossingState
    depth: int


@runtime_checkable
class Frontier(Protocol):
    """Protocol for frontier implementations.

    A Frontier manages the set of scheduled but unexpanded states.
    The search driver pops from it to decide what to expand next.
    """

    def push(self, handle: int, state: CrossingState, depth: int) -> None:
        """Schedule a state.

        Args:
            handle: Graph node handle of the state.
            state: The state to schedule.
            depth: Crossings from the root to this state.
        """
        ...

    def pop(self) -> FrontierEntry | None:
        """Remove and return the next entry, or None if empty."""
        ...

    def is_empty(self) -> bool:
        """Check if the frontier is empty."""
        ...

    def __len__(self) -> int:
        """Return the number of pending entries."""
        ...


class BaseFrontier(ABC):
    """Base class for frontier implementations."""

    @abstractmethod
    def push(self, handle: int, state: CrossingState, depth: int) -> None:
        """Schedule a state."""
        ...

    @abstractmethod
    def pop(self) -> FrontierEntry | None:
        """Remove and return the next entry."""
        ...

    def is_empty(self) -> bool:
        """Check if the frontier is empty."""
        return len(self) == 0

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of pending entries."""
        ...


class QueueFrontier(BaseFrontier):
    """FIFO frontier for breadth-first search.

    Entries are expanded in the order they were pushed.
    With unit-cost crossings this finds a path with the fewest crossings.
    """

    def __init__(self) -> None:
        self._queue: deque[FrontierEntry] = deque()

    def push(self, handle: int, state: CrossingState, depth: int) -> None:
        self._queue.append(FrontierEntry(handle, state, depth))

    def pop(self) -> FrontierEntry | None:
        if not self._queue:
            return None
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class StackFrontier(BaseFrontier):
    """LIFO frontier for depth-first search.

    Most recently pushed entries are expanded first.
    This explores deeply before backtracking.
    """

    def __init__(self) -> None:
        self._stack: list[FrontierEntry] = []

    def push(self, handle: int, state: CrossingState, depth: int) -> None:
        self._stack.append(FrontierEntry(handle, state, depth))

    def pop(self) -> FrontierEntry | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class _PriorityFrontier(BaseFrontier):
    """Min-heap frontier ordered by a per-entry priority tuple.

    A monotonically increasing insertion counter is the last element of
    every heap key, so equal priorities pop in insertion order and no two
    keys ever compare equal.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[tuple[int, ...], int, FrontierEntry]] = []
        self._counter = itertools.count()

    @abstractmethod
    def priority(self, state: CrossingState, depth: int) -> tuple[int, ...]:
        """Ordering key for a state; smaller pops first."""
        ...

    def push(self, handle: int, state: CrossingState, depth: int) -> None:
        entry = FrontierEntry(handle, state, depth)
        heapq.heappush(self._heap, (self.priority(state, depth), next(self._counter), entry))

    def pop(self) -> FrontierEntry | None:
        if not self._heap:
            return None
        _, _, entry = heapq.heappop(self._heap)
        return entry

    def __len__(self) -> int:
        return len(self._heap)


class HeuristicFrontier(_PriorityFrontier):
    """Greedy best-first frontier.

    Pops the entry with the smallest heuristic. Ties go to the entry
    pushed first, which decides among equally promising states.
    """

    def priority(self, state: CrossingState, depth: int) -> tuple[int, ...]:
        return (state.heuristic(),)


class AStarFrontier(_PriorityFrontier):
    """A* frontier.

    Pops the entry with the smallest heuristic + depth, where depth is the
    number of crossings so far (each crossing costs 1). Among equal totals
    the smaller heuristic wins, then insertion order.
    """

    def priority(self, state: CrossingState, depth: int) -> tuple[int, ...]:
        h = state.heuristic()
        return (h + depth, h)


__all__ = [
    "Frontier",
    "FrontierEntry",
    "BaseFrontier",
    "QueueFrontier",
    "StackFrontier",
    "HeuristicFrontier",
    "AStarFrontier",
]
