"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from rivercross.config import DEFAULT_INITIAL_STATE, SearchConfig, load_config
from rivercross.errors import ConfigValidationError
from rivercross.exploration import Strategy
from rivercross.world import GoalMode, Rules


class TestSearchConfig:
    def test_defaults(self) -> None:
        config = SearchConfig()
        assert config.initial_state == DEFAULT_INITIAL_STATE == "0 0 3 3 right"
        assert config.strategy == "bfs"
        assert config.boat_capacity == 2
        assert config.goal == "missionaries"
        assert config.max_expansions is None
        assert config.verbose is False

    def test_rules(self) -> None:
        config = SearchConfig(total_cannibals=4, boat_capacity=3, goal="everyone")
        assert config.rules() == Rules(
            total_cannibals=4, total_missionaries=3, boat_capacity=3, goal=GoalMode.EVERYONE
        )

    def test_strategy_alias_normalised(self) -> None:
        config = SearchConfig(strategy="A*")
        assert config.strategy == "astar"
        assert config.search_strategy is Strategy.ASTAR

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ConfigValidationError):
            SearchConfig(strategy="random")

    def test_unknown_goal(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            SearchConfig(goal="cannibals")
        assert exc_info.value.field == "goal"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("boat_capacity", 0),
            ("total_cannibals", -1),
            ("total_missionaries", -2),
            ("max_expansions", 0),
            ("initial_state", "   "),
        ],
    )
    def test_invalid_values(self, field: str, value: object) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            SearchConfig(**{field: value})
        assert exc_info.value.field == field

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RIVERCROSS_BOAT_CAPACITY", "1")
        assert SearchConfig().boat_capacity == 1


class TestLoadConfig:
    def test_no_file(self) -> None:
        assert load_config().strategy == "bfs"

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "nope.yaml").boat_capacity == 2

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("strategy: dfs\ninitial_state: '1 1 2 2 left'\nmax_expansions: 50\n")

        config = load_config(path)
        assert config.strategy == "dfs"
        assert config.initial_state == "1 1 2 2 left"
        assert config.max_expansions == 50

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("strategy: dfs\nboat_capacity: 3\n")
        monkeypatch.setenv("RIVERCROSS_STRATEGY", "greedy")
        monkeypatch.setenv("RIVERCROSS_MAX_EXPANSIONS", "none")

        config = load_config(path)
        assert config.strategy == "greedy"
        assert config.boat_capacity == 3
        assert config.max_expansions is None

    def test_bad_env_integer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RIVERCROSS_BOAT_CAPACITY", "two")
        with pytest.raises(ConfigValidationError):
            load_config()

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("- bfs\n- dfs\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_invalid_yaml_value(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("boat_capacity: 0\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_type_errors_become_config_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "rivercross.yaml"
        path.write_text("boat_capacity: [1, 2]\n")

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)
        assert exc_info.value.field == "boat_capacity"
        assert isinstance(exc_info.value.cause, PydanticValidationError)
