"""Move table - Which boat loads can leave a bank.

A load is a ``(cannibals, missionaries)`` pair carried in one crossing.
The table is plain data keyed by the bank's ``(cannibals, missionaries)``
so it can be inspected and swapped independently of the search loop.
"""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple


class Load(NamedTuple):
    """People carried across in one trip."""

    cannibals: int
    missionaries: int

    @property
    def size(self) -> int:
        return self.cannibals + self.missionaries


MoveTable = dict[tuple[int, int], tuple[Load, ...]]


def load_combinations(cannibals: int, missionaries: int, capacity: int) -> tuple[Load, ...]:
    """Every load that can leave a bank holding the given people.

    Loads carry at least one person, at most ``capacity``, and never more
    of a kind than the bank holds. Ordered by load size (largest first),
    then by cannibals (most first).

    Example::

        >>> [tuple(load) for load in load_combinations(3, 3, 2)]
        [(2, 0), (1, 1), (0, 2), (1, 0), (0, 1)]
    """
    loads: list[Load] = []
    for size in range(capacity, 0, -1):
        for c in range(min(size, cannibals), -1, -1):
            m = size - c
            if m <= missionaries:
                loads.append(Load(c, m))
    return tuple(loads)


@lru_cache(maxsize=32)
def move_table(max_cannibals: int, max_missionaries: int, capacity: int) -> MoveTable:
    """Precompute loads for every bank population up to the world totals."""
    return {
        (c, m): load_combinations(c, m, capacity)
        for c in range(max_cannibals + 1)
        for m in range(max_missionaries + 1)
    }


__all__ = ["Load", "MoveTable", "load_combinations", "move_table"]
