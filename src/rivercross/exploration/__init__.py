"""Exploration Context - Searching the state space.

The Exploration context is responsible for:
- Scheduling states on a strategy-specific frontier
- Deduplicating states by canonical key
- Recording provenance in the search graph
- Reconstructing the path to a goal
"""

from rivercross.exploration.agent import Agent, solve
from rivercross.exploration.frontier import (
    AStarFrontier,
    BaseFrontier,
    Frontier,
    FrontierEntry,
    HeuristicFrontier,
    QueueFrontier,
    StackFrontier,
)
from rivercross.exploration.graph import ROOT_MOVE, Graph, Node
from rivercross.exploration.path import reconstruct, walk_to_root
from rivercross.exploration.result import SearchResult, SearchStatus
from rivercross.exploration.strategies import Strategy
from rivercross.exploration.visited import VisitedSet

__all__ = [
    # Driver
    "Agent",
    "solve",
    "SearchResult",
    "SearchStatus",
    # Strategies
    "Strategy",
    # Frontiers
    "Frontier",
    "FrontierEntry",
    "BaseFrontier",
    "QueueFrontier",
    "StackFrontier",
    "HeuristicFrontier",
    "AStarFrontier",
    # Graph
    "Graph",
    "Node",
    "ROOT_MOVE",
    "VisitedSet",
    # Paths
    "reconstruct",
    "walk_to_root",
]
