"""Tests for frontier implementations and strategy selection."""

from __future__ import annotations

import pytest

from rivercross.errors import ConfigValidationError
from rivercross.exploration import (
    AStarFrontier,
    Frontier,
    HeuristicFrontier,
    QueueFrontier,
    StackFrontier,
    Strategy,
)
from rivercross.world import CrossingState

H3 = CrossingState.from_counts(0, 0, 3, 3, "right")
H2 = CrossingState.from_counts(0, 1, 3, 2, "left")
H1_A = CrossingState.from_counts(0, 2, 3, 1, "left")
H1_B = CrossingState.from_counts(1, 2, 2, 1, "left")


def drain(frontier: Frontier) -> list[int]:
    handles = []
    while (entry := frontier.pop()) is not None:
        handles.append(entry.handle)
    return handles


class TestQueueFrontier:
    def test_fifo_order(self) -> None:
        frontier = QueueFrontier()
        for handle in range(4):
            frontier.push(handle, H3, handle)
        assert drain(frontier) == [0, 1, 2, 3]

    def test_pop_empty_returns_none(self) -> None:
        frontier = QueueFrontier()
        assert frontier.is_empty()
        assert frontier.pop() is None

    def test_len_tracks_pushes(self) -> None:
        frontier = QueueFrontier()
        frontier.push(0, H3, 0)
        frontier.push(1, H3, 0)
        assert len(frontier) == 2
        frontier.pop()
        assert len(frontier) == 1

    def test_entry_fields(self) -> None:
        frontier = QueueFrontier()
        frontier.push(7, H2, 3)
        entry = frontier.pop()
        assert entry is not None
        assert (entry.handle, entry.state, entry.depth) == (7, H2, 3)


class TestStackFrontier:
    def test_lifo_order(self) -> None:
        frontier = StackFrontier()
        for handle in range(4):
            frontier.push(handle, H3, handle)
        assert drain(frontier) == [3, 2, 1, 0]

    def test_pop_empty_returns_none(self) -> None:
        assert StackFrontier().pop() is None


class TestHeuristicFrontier:
    def test_smallest_heuristic_first(self) -> None:
        frontier = HeuristicFrontier()
        frontier.push(0, H3, 0)
        frontier.push(1, H1_A, 5)
        frontier.push(2, H2, 1)
        assert drain(frontier) == [1, 2, 0]

    def test_ties_pop_in_insertion_order(self) -> None:
        frontier = HeuristicFrontier()
        frontier.push(0, H1_B, 0)
        frontier.push(1, H1_A, 0)
        frontier.push(2, H1_B, 0)
        assert drain(frontier) == [0, 1, 2]

    def test_duplicates_are_not_merged(self) -> None:
        frontier = HeuristicFrontier()
        frontier.push(0, H2, 0)
        frontier.push(0, H2, 0)
        assert len(frontier) == 2


class TestAStarFrontier:
    def test_orders_by_heuristic_plus_depth(self) -> None:
        frontier = AStarFrontier()
        frontier.push(0, H3, 0)  # f = 3, h = 3
        frontier.push(1, H1_A, 3)  # f = 4
        frontier.push(2, H2, 1)  # f = 3, h = 2
        assert drain(frontier) == [2, 0, 1]

    def test_equal_f_and_h_use_insertion_order(self) -> None:
        frontier = AStarFrontier()
        frontier.push(0, H1_A, 2)
        frontier.push(1, H1_B, 2)
        assert drain(frontier) == [0, 1]

    def test_pop_empty_returns_none(self) -> None:
        assert AStarFrontier().pop() is None


class TestStrategy:
    @pytest.mark.parametrize(
        "strategy, frontier_type",
        [
            (Strategy.BFS, QueueFrontier),
            (Strategy.DFS, StackFrontier),
            (Strategy.GREEDY, HeuristicFrontier),
            (Strategy.ASTAR, AStarFrontier),
        ],
    )
    def test_create_frontier(self, strategy: Strategy, frontier_type: type) -> None:
        frontier = strategy.create_frontier()
        assert isinstance(frontier, frontier_type)
        assert isinstance(frontier, Frontier)
        assert frontier.is_empty()

    def test_frontiers_are_fresh(self) -> None:
        assert Strategy.BFS.create_frontier() is not Strategy.BFS.create_frontier()

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("bfs", Strategy.BFS),
            ("DFS", Strategy.DFS),
            ("greedy", Strategy.GREEDY),
            ("greedy-best-first", Strategy.GREEDY),
            ("astar", Strategy.ASTAR),
            ("a*", Strategy.ASTAR),
            ("A_Star", Strategy.ASTAR),
            (Strategy.DFS, Strategy.DFS),
        ],
    )
    def test_parse(self, name: str, expected: Strategy) -> None:
        assert Strategy.parse(name) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            Strategy.parse("dijkstra")
        assert exc_info.value.field == "strategy"
        assert "bfs" in exc_info.value.suggestions[0]
