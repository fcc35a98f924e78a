"""Path reconstruction from a goal node back to the root."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rivercross.errors import ProvenanceCycleError

if TYPE_CHECKING:
    from rivercross.exploration.graph import Graph, Node


def walk_to_root(graph: Graph, handle: int) -> list[Node]:
    """Nodes from the root down to ``handle``, inclusive.

    The chain must reach the root in exactly ``depth`` parent hops. A
    longer chain or a repeated handle means the graph is corrupt.

    Raises:
        ProvenanceCycleError: If the parent chain does not terminate as expected.
    """
    node = graph.get(handle)
    limit = node.depth + 1
    chain: list[Node] = []
    seen: set[int] = set()

    current: Node | None = node
    while current is not None:
        if current.handle in seen or len(chain) >= limit:
            raise ProvenanceCycleError(
                f"Parent chain from node {handle} does not reach the root "
                f"within {limit} nodes",
                handle=handle,
            )
        seen.add(current.handle)
        chain.append(current)
        current = graph.get(current.parent) if current.parent is not None else None

    if len(chain) != limit:
        raise ProvenanceCycleError(
            f"Parent chain from node {handle} has {len(chain)} nodes, expected {limit}",
            handle=handle,
        )

    chain.reverse()
    return chain


def reconstruct(graph: Graph, handle: int) -> list[str]:
    """Move descriptions from the root to ``handle``.

    The first element is always the root's own description.
    """
    return [node.move for node in walk_to_root(graph, handle)]


__all__ = ["reconstruct", "walk_to_root"]
