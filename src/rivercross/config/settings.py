"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError
from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rivercross.errors import ConfigValidationError, ErrorContext
from rivercross.exploration.strategies import Strategy
from rivercross.world import GoalMode, Rules

DEFAULT_INITIAL_STATE = "0 0 3 3 right"


class SearchConfig(BaseSettings):
    """Configuration for a rivercross search."""

    model_config = SettingsConfigDict(
        env_prefix="RIVERCROSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_state: str = DEFAULT_INITIAL_STATE
    strategy: str = Strategy.BFS.value
    total_cannibals: int = 3
    total_missionaries: int = 3
    boat_capacity: int = 2
    goal: str = GoalMode.MISSIONARIES.value
    max_expansions: int | None = None
    verbose: bool = False

    @field_validator("initial_state", mode="before")
    @classmethod
    def validate_initial_state(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ConfigValidationError(
                message="initial_state must be a non-empty five-token string",
                field="initial_state",
                value=v,
            )
        return v

    @field_validator("strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v: str | Strategy) -> str:
        return Strategy.parse(v if isinstance(v, Strategy) else str(v)).value

    @field_validator("goal", mode="before")
    @classmethod
    def validate_goal(cls, v: str | GoalMode) -> str:
        valid = [mode.value for mode in GoalMode]
        value = v.value if isinstance(v, GoalMode) else str(v).strip().lower()
        if value not in valid:
            raise ConfigValidationError(
                message=f"Invalid goal: {v!r}. Valid: {valid}",
                field="goal",
                value=v,
                context=ErrorContext(extra={"valid_goals": valid}),
            )
        return value

    @field_validator("total_cannibals", "total_missionaries")
    @classmethod
    def validate_total(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ConfigValidationError(
                message=f"{info.field_name} must be >= 0, got {v}",
                field=info.field_name,
                value=v,
            )
        return v

    @field_validator("boat_capacity")
    @classmethod
    def validate_boat_capacity(cls, v: int) -> int:
        if v < 1:
            raise ConfigValidationError(
                message=f"boat_capacity must be >= 1, got {v}",
                field="boat_capacity",
                value=v,
            )
        return v

    @field_validator("max_expansions")
    @classmethod
    def validate_max_expansions(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ConfigValidationError(
                message=f"max_expansions must be >= 1, got {v}",
                field="max_expansions",
                value=v,
            )
        return v

    @property
    def search_strategy(self) -> Strategy:
        return Strategy(self.strategy)

    def rules(self) -> Rules:
        """World rules described by this configuration."""
        return Rules(
            total_cannibals=self.total_cannibals,
            total_missionaries=self.total_missionaries,
            boat_capacity=self.boat_capacity,
            goal=GoalMode(self.goal),
        )


def load_config(config_path: str | Path | None = None) -> SearchConfig:
    """Load configuration from file and environment.

    Priority: CLI args > env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ConfigValidationError(
                    message=f"{config_path} must contain a mapping",
                    value=loaded,
                    context=ErrorContext(extra={"path": str(config_path)}),
                )
            config_data = loaded

    env_overrides = _get_env_overrides()
    config_data.update(env_overrides)

    try:
        return SearchConfig(**config_data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigValidationError(
            message=f"Invalid value for {field}: {first['msg']}",
            field=field,
            value=first.get("input"),
            cause=e,
        ) from e


def _parse_optional_int(value: str) -> int | None:
    if value.strip().lower() in ("", "none", "null"):
        return None
    return int(value)


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "RIVERCROSS_INITIAL_STATE": "initial_state",
        "RIVERCROSS_STRATEGY": "strategy",
        "RIVERCROSS_GOAL": "goal",
        "RIVERCROSS_TOTAL_CANNIBALS": ("total_cannibals", int),
        "RIVERCROSS_TOTAL_MISSIONARIES": ("total_missionaries", int),
        "RIVERCROSS_BOAT_CAPACITY": ("boat_capacity", int),
        "RIVERCROSS_MAX_EXPANSIONS": ("max_expansions", _parse_optional_int),
        "RIVERCROSS_VERBOSE": ("verbose", lambda x: x.lower() in ("true", "1", "yes")),
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        if isinstance(config_key, tuple):
            key, converter = config_key
            try:
                overrides[key] = converter(value)
            except ValueError:
                raise ConfigValidationError(
                    message=f"{env_key} must be an integer, got {value!r}",
                    field=key,
                    value=value,
                ) from None
        else:
            overrides[config_key] = value

    return overrides


__all__ = ["DEFAULT_INITIAL_STATE", "SearchConfig", "load_config"]
