"""SearchResult - Output of a search run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from rivercross.exploration.graph import Graph, Node
from rivercross.exploration.path import walk_to_root
from rivercross.exploration.strategies import Strategy


class SearchStatus(str, Enum):
    """Lifecycle of a search run."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"
    TRUNCATED = "truncated"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (
            SearchStatus.SUCCEEDED,
            SearchStatus.EXHAUSTED,
            SearchStatus.TRUNCATED,
            SearchStatus.FAILED,
        )


@dataclass
class SearchResult:
    """The complete output of a search run.

    Example::

        result = Agent(initial, Strategy.ASTAR).run()

        if result.found:
            print(f"{result.move_count} crossings")
            for step in result.steps:
                print(step)

    Attributes:
        status: How the run ended.
        strategy: Strategy that drove the frontier.
        initial_key: Canonical key of the initial state.
        graph: Every node the run created.
        goal: The goal node, if one was reached.
        steps: Move descriptions root to goal ("root state" first), empty if not found.
        states_visited: Entries popped from the frontier, the goal included.
        states_generated: States scheduled onto the frontier, the root excluded.
        started_at: When the run started.
        finished_at: When the run finished.
        duration_ms: Total run time in milliseconds.
    """

    strategy: Strategy
    initial_key: str
    graph: Graph = field(default_factory=Graph, repr=False)
    status: SearchStatus = SearchStatus.RUNNING
    goal: Node | None = None
    steps: list[str] = field(default_factory=list)
    states_visited: int = 0
    states_generated: int = 0
    started_at: datetime = field(default_factory=datetime.now)
    finished_at: datetime | None = None
    duration_ms: float = 0.0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED and self.goal is not None

    @property
    def move_count(self) -> int:
        """Crossings on the solution path, 0 when nothing was found."""
        if not self.found:
            return 0
        return len(self.steps) - 1

    @property
    def path_keys(self) -> list[str]:
        """Canonical keys of the states on the solution path, root first."""
        if self.goal is None:
            return []
        return [node.state.canonical_key() for node in walk_to_root(self.graph, self.goal.handle)]

    def finish(self, status: SearchStatus) -> None:
        """Mark the run as finished and compute duration."""
        self.status = status
        self.finished_at = datetime.now()
        self.duration_ms = (self.finished_at - self.started_at).total_seconds() * 1000

    def summary(self) -> dict[str, Any]:
        """Get a summary of the run as a dict."""
        return {
            "status": self.status.value,
            "strategy": self.strategy.value,
            "initial_state": self.initial_key,
            "found": self.found,
            "moves": self.move_count,
            "states_visited": self.states_visited,
            "states_generated": self.states_generated,
            "nodes": self.graph.node_count,
            "duration_ms": round(self.duration_ms, 2),
        }


__all__ = ["SearchResult", "SearchStatus"]
