"""Graph - Arena of search nodes with parent links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from rivercross.errors import SearchError
from rivercross.world import CrossingState

ROOT_MOVE = "root state"


@dataclass(frozen=True)
class Node:
    """One discovered state and how the search reached it.

    Attributes:
        handle: Index of this node in its Graph.
        state: The state reached.
        parent: Handle of the node it was expanded from (None for the root).
        move: Description of the crossing from the parent.
        depth: Crossings from the root.
    """

    handle: int
    state: CrossingState
    parent: int | None
    move: str
    depth: int

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "handle": self.handle,
            "state": self.state.canonical_key(),
            "parent": self.parent,
            "move": self.move,
            "depth": self.depth,
        }


class Graph:
    """Holds every node created during one search run.

    Nodes are addressed by integer handles and never removed, so a
    handle stays valid for the lifetime of the graph. Each state appears
    at most once because the driver filters duplicates before adding.

    Example::

        graph = Graph()
        root = graph.add_root(initial)
        child = graph.add_child(root.handle, next_state, "send 2 cannibals ...")
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    @property
    def root(self) -> Node | None:
        """The first node added, if any."""
        return self._nodes[0] if self._nodes else None

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def add_root(self, state: CrossingState) -> Node:
        """Add the search root.

        Raises:
            SearchError: If the graph already has a root.
        """
        if self._nodes:
            raise SearchError("Graph already has a root node")
        node = Node(handle=0, state=state, parent=None, move=ROOT_MOVE, depth=0)
        self._nodes.append(node)
        return node

    def add_child(self, parent: int, state: CrossingState, move: str) -> Node:
        """Add a node reached from ``parent`` by ``move``."""
        parent_node = self.get(parent)
        node = Node(
            handle=len(self._nodes),
            state=state,
            parent=parent_node.handle,
            move=move,
            depth=parent_node.depth + 1,
        )
        self._nodes.append(node)
        return node

    def get(self, handle: int) -> Node:
        """Look up a node by handle.

        Raises:
            SearchError: If no node has this handle.
        """
        if not 0 <= handle < len(self._nodes):
            raise SearchError(f"No node with handle {handle}")
        return self._nodes[handle]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)


__all__ = ["Graph", "Node", "ROOT_MOVE"]
