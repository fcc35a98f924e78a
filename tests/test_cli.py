"""Tests for the rivercross command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from rivercross.cli import cli


def invoke(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestSolve:
    def test_default_state(self) -> None:
        result = invoke("solve", "--no-color")
        assert result.exit_code == 0
        assert "SOLVED in 7 moves" in result.output

    def test_explicit_state_and_strategy(self) -> None:
        result = invoke("solve", "0 0 3 3 right", "--strategy", "astar", "--no-color")
        assert result.exit_code == 0
        assert "A* search" in result.output

    def test_json_output(self) -> None:
        result = invoke("solve", "0 0 3 3 right", "--format", "json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["summary"]["moves"] == 7
        assert data["steps"][0]["move"] == "root state"

    def test_everyone_goal(self) -> None:
        result = invoke("solve", "--goal", "everyone", "--no-color")
        assert result.exit_code == 0
        assert "SOLVED in 11 moves" in result.output

    def test_truncated_exits_not_found(self) -> None:
        result = invoke("solve", "--max-expansions", "1", "--no-color")
        assert result.exit_code == 1
        assert "STOPPED" in result.output

    def test_invalid_totals(self) -> None:
        result = invoke("solve", "0 0 2 3 right")
        assert result.exit_code == 2
        assert "E201" in result.output

    def test_malformed_state(self) -> None:
        result = invoke("solve", "0 0 3 right")
        assert result.exit_code == 2
        assert "E203" in result.output

    def test_verbose_error_lists_suggestions(self) -> None:
        result = invoke("-v", "solve", "0 0 3 3 sideways")
        assert result.exit_code == 2
        assert "Suggestions:" in result.output

    def test_unknown_strategy_rejected_by_click(self) -> None:
        result = invoke("solve", "--strategy", "random")
        assert result.exit_code == 2


class TestConfigFile:
    def test_config_rules(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("boat_capacity: 1\n")

        result = invoke("-c", str(path), "solve", "--no-color")
        assert result.exit_code == 1
        assert "NO SOLUTION" in result.output

    def test_config_strategy(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("strategy: greedy\n")

        result = invoke("-c", str(path), "solve", "--no-color")
        assert result.exit_code == 0
        assert "Greedy best-first search" in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("boat_capacity: 0\n")

        result = invoke("-c", str(path), "solve")
        assert result.exit_code == 2
        assert "E202" in result.output

    def test_uncoercible_config_value(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("total_cannibals: abc\n")

        result = invoke("-c", str(path), "solve")
        assert result.exit_code == 2
        assert "E202" in result.output
        assert "total_cannibals" in result.output


class TestCompare:
    def test_table(self) -> None:
        result = invoke("compare")
        assert result.exit_code == 0
        for name in ("bfs", "dfs", "greedy", "astar"):
            assert name in result.output
        assert "succeeded" in result.output

    def test_unsolvable(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("boat_capacity: 1\n")

        result = invoke("-c", str(path), "compare")
        assert result.exit_code == 1
        assert "exhausted" in result.output


class TestSuccessors:
    def test_lists_moves(self) -> None:
        result = invoke("successors", "0 0 3 3 right")
        assert result.exit_code == 0
        assert "send 2 cannibals and 0 missionaries to the left side -> 2 0 1 3 left" in result.output
        assert "0 2 3 1 left  [failure]" in result.output

    def test_flags_goal(self) -> None:
        result = invoke("successors", "1 1 2 2 right")
        assert result.exit_code == 0
        assert "1 3 2 0 left  [goal]" in result.output

    def test_requires_state(self) -> None:
        assert invoke("successors").exit_code == 2
