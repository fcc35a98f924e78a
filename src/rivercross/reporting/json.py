"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rivercross.exploration import SearchResult


class JSONReporter:
    """Formats SearchResult as JSON."""

    def __init__(self, indent: int | None = 2, include_graph: bool = False) -> None:
        self.indent = indent
        self.include_graph = include_graph

    def report(self, result: SearchResult) -> str:
        """Generate JSON report."""
        data = self._to_dict(result)
        return json.dumps(data, indent=self.indent, default=str)

    def _to_dict(self, result: SearchResult) -> dict[str, Any]:
        data: dict[str, Any] = {
            "summary": result.summary(),
            "steps": [
                {"move": step, "state": key}
                for step, key in zip(result.steps, result.path_keys)
            ],
            "started_at": result.started_at.isoformat(),
            "finished_at": result.finished_at.isoformat() if result.finished_at else None,
        }
        if self.include_graph:
            data["graph"] = [node.to_dict() for node in result.graph]
        return data


__all__ = ["JSONReporter"]
