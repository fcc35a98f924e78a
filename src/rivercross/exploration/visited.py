"""VisitedSet - Deduplication index over canonical state keys."""

from __future__ import annotations

from collections.abc import Iterator


class VisitedSet:
    """Canonical keys of every state already scheduled in one search run.

    A key is inserted when its state is scheduled, not when it is popped,
    so the same configuration never sits in the frontier twice.
    """

    def __init__(self) -> None:
        self._keys: set[str] = set()

    def contains(self, key: str) -> bool:
        return key in self._keys

    def insert(self, key: str) -> bool:
        """Mark ``key`` as seen.

        Returns:
            True if the key was new, False if it was already present.
        """
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)


__all__ = ["VisitedSet"]
