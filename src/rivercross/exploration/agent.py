"""Agent - The search driver."""

from __future__ import annotations

import logging

from rivercross.errors import RiverCrossError, SearchError
from rivercross.exploration.frontier import BaseFrontier
from rivercross.exploration.graph import Graph, Node
from rivercross.exploration.path import reconstruct
from rivercross.exploration.result import SearchResult, SearchStatus
from rivercross.exploration.strategies import Strategy
from rivercross.exploration.visited import VisitedSet
from rivercross.world import DEFAULT_RULES, CrossingState, Rules, parse_state

logger = logging.getLogger(__name__)


class Agent:
    """Runs one search from an initial state to a goal.

    The search algorithm:
    1. Add the root to the graph and the visited set
    2. Schedule the root's successors
    3. Until the frontier is empty:
       a. Pop the next entry
       b. Discard it if it is a failure state
       c. Stop if it is a goal state
       d. Otherwise schedule its successors
    4. Return the result with the reconstructed path

    Every successor goes through the same filter before it is scheduled:
    failure states and already-seen states are dropped. The filter is
    identical for all strategies; only the frontier order differs.

    An Agent runs once. Build a new one for another search.

    Example::

        agent = Agent(parse_state("0 0 3 3 right"), strategy=Strategy.ASTAR)
        result = agent.run()
        print(result.steps)
    """

    def __init__(
        self,
        initial_state: CrossingState,
        strategy: Strategy | str = Strategy.BFS,
        max_expansions: int | None = None,
    ) -> None:
        """Initialize the agent.

        Args:
            initial_state: Validated state to search from.
            strategy: Frontier discipline, as a Strategy or one of its names.
            max_expansions: Stop with TRUNCATED when a popped non-goal state
                would need expansion number ``max_expansions + 1``. A goal is
                still returned when popped after the last allowed expansion.
                None means run until a goal is found or the frontier empties.

        Raises:
            ConfigValidationError: If the strategy name is unknown.
            ValueError: If max_expansions is less than 1.
        """
        if max_expansions is not None and max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {max_expansions}")

        self.initial_state = initial_state
        self.strategy = Strategy.parse(strategy)
        self.max_expansions = max_expansions

        self.graph = Graph()
        self.visited = VisitedSet()
        self.frontier: BaseFrontier = self.strategy.create_frontier()
        self.status = SearchStatus.IDLE
        self._expansions = 0
        self._current_key = initial_state.canonical_key()

    @property
    def expansions(self) -> int:
        """Number of popped states whose successors were scheduled."""
        return self._expansions

    def run(self) -> SearchResult:
        """Run the search and return its result.

        If an internal error escapes, the agent ends FAILED and the error's
        context names the strategy and the state being processed.

        Raises:
            SearchError: If this agent has already run.
            InvalidTotalError: If successor generation produced an impossible state.
            ProvenanceCycleError: If the goal's parent chain is corrupt.
        """
        if self.status is not SearchStatus.IDLE:
            raise SearchError(
                f"Agent already ran (status: {self.status.value})",
                suggestions=["Create a new Agent for each search"],
            )

        self.status = SearchStatus.RUNNING
        result = SearchResult(
            strategy=self.strategy,
            initial_key=self.initial_state.canonical_key(),
            graph=self.graph,
        )
        logger.info(
            "Starting %s search from %r", self.strategy.value, result.initial_key
        )

        try:
            status = self._search(result)
        except RiverCrossError as e:
            self.status = SearchStatus.FAILED
            result.finish(SearchStatus.FAILED)
            e.context.strategy = e.context.strategy or self.strategy.value
            e.context.state = e.context.state or self._current_key
            logger.error(
                "%s search failed at %r: %s", self.strategy.value, self._current_key, e.message
            )
            raise

        self.status = status
        result.finish(status)
        logger.info(
            "%s search %s: %d moves, %d visited, %d generated in %.2fms",
            self.strategy.value,
            status.value,
            result.move_count,
            result.states_visited,
            result.states_generated,
            result.duration_ms,
        )
        return result

    def _search(self, result: SearchResult) -> SearchStatus:
        """The expansion loop; returns the terminal status."""
        root = self.graph.add_root(self.initial_state)
        self.visited.insert(root.state.canonical_key())
        result.states_generated += self._schedule_successors(root)

        while not self.frontier.is_empty():
            entry = self.frontier.pop()
            if entry is None:
                break
            result.states_visited += 1
            state = entry.state
            self._current_key = state.canonical_key()

            if state.is_failure():
                logger.debug("Discarding failure state %s", state)
                continue

            if state.is_goal():
                node = self.graph.get(entry.handle)
                result.goal = node
                result.steps = reconstruct(self.graph, node.handle)
                return SearchStatus.SUCCEEDED

            if self.max_expansions is not None and self._expansions >= self.max_expansions:
                logger.debug("Expansion limit %d reached at %s", self.max_expansions, state)
                return SearchStatus.TRUNCATED

            self._expansions += 1
            added = self._schedule_successors(self.graph.get(entry.handle))
            result.states_generated += added
            logger.debug(
                "Expanded %s at depth %d: %d scheduled, frontier size %d",
                state, entry.depth, added, len(self.frontier),
            )

        return SearchStatus.EXHAUSTED

    def _schedule_successors(self, node: Node) -> int:
        """Filter and push the successors of ``node``; return how many were pushed."""
        scheduled = 0
        for _, child in node.state.iter_moves():
            if isinstance(child, Exception):
                # Generated loads are bounded by the bank, so this is a bug.
                raise child
            if child.is_failure():
                continue
            if not self.visited.insert(child.canonical_key()):
                continue
            child_node = self.graph.add_child(
                node.handle, child, child.describe_move_from(node.state)
            )
            self.frontier.push(child_node.handle, child, child_node.depth)
            scheduled += 1
        return scheduled


def solve(
    initial: CrossingState | str,
    strategy: Strategy | str = Strategy.BFS,
    rules: Rules = DEFAULT_RULES,
    max_expansions: int | None = None,
) -> SearchResult:
    """Search from ``initial`` and return the result.

    Args:
        initial: A state or its five-token encoding. ``rules`` applies only
            when parsing text.
        strategy: Frontier discipline.
        rules: World totals, boat capacity and goal mode for parsed text.
        max_expansions: Optional expansion cutoff.

    Raises:
        ParseError: If ``initial`` is malformed text.
        InvalidTotalError: If the initial counts are impossible.
    """
    if isinstance(initial, str):
        initial = parse_state(initial, rules=rules)
    return Agent(initial, strategy=strategy, max_expansions=max_expansions).run()


__all__ = ["Agent", "solve"]
