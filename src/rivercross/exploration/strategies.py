"""Exploration strategies - Which frontier discipline drives the search."""

from __future__ import annotations

from enum import Enum

from rivercross.errors import ConfigValidationError
from rivercross.exploration.frontier import (
    AStarFrontier,
    BaseFrontier,
    HeuristicFrontier,
    QueueFrontier,
    StackFrontier,
)


class Strategy(str, Enum):
    """The closed set of search strategies.

    - BFS: Breadth-first, guarantees the fewest crossings
    - DFS: Depth-first, finds some path with little memory
    - GREEDY: Greedy best-first on the heuristic alone
    - ASTAR: Heuristic plus crossings made so far

    Example::

        strategy = Strategy.parse("a*")
        frontier = strategy.create_frontier()
    """

    BFS = "bfs"
    DFS = "dfs"
    GREEDY = "greedy"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def create_frontier(self) -> BaseFrontier:
        """Build a fresh, empty frontier for this strategy."""
        return _FRONTIERS[self]()

    @classmethod
    def parse(cls, name: str | Strategy) -> Strategy:
        """Resolve a strategy from its name or one of its aliases.

        Raises:
            ConfigValidationError: If the name is not recognised.
        """
        if isinstance(name, Strategy):
            return name
        key = name.strip().lower().replace("-", "_")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ConfigValidationError(
                f"Unknown strategy {name!r}",
                field="strategy",
                value=name,
                suggestions=[f"Use one of: {', '.join(s.value for s in cls)}"],
            ) from None


_FRONTIERS: dict[Strategy, type[BaseFrontier]] = {
    Strategy.BFS: QueueFrontier,
    Strategy.DFS: StackFrontier,
    Strategy.GREEDY: HeuristicFrontier,
    Strategy.ASTAR: AStarFrontier,
}

_LABELS = {
    Strategy.BFS: "Breadth-first",
    Strategy.DFS: "Depth-first",
    Strategy.GREEDY: "Greedy best-first",
    Strategy.ASTAR: "A*",
}

_ALIASES = {
    "bfs": Strategy.BFS,
    "breadth_first": Strategy.BFS,
    "dfs": Strategy.DFS,
    "depth_first": Strategy.DFS,
    "greedy": Strategy.GREEDY,
    "greedy_best_first": Strategy.GREEDY,
    "best_first": Strategy.GREEDY,
    "astar": Strategy.ASTAR,
    "a*": Strategy.ASTAR,
    "a_star": Strategy.ASTAR,
}


__all__ = ["Strategy"]
