"""Pytest fixtures for rivercross tests."""

from __future__ import annotations

import os

import pytest

from rivercross.world import CrossingState, GoalMode, Rules, parse_state

CANONICAL = "0 0 3 3 right"


@pytest.fixture
def canonical_state() -> CrossingState:
    """Everyone on the right bank with the boat."""
    return parse_state(CANONICAL)


@pytest.fixture
def everyone_rules() -> Rules:
    """Classic rules: the whole party must reach the left bank."""
    return Rules(goal=GoalMode.EVERYONE)


@pytest.fixture
def rowboat_rules() -> Rules:
    """A boat that carries one person at a time."""
    return Rules(boat_capacity=1)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RIVERCROSS_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("RIVERCROSS_"):
            monkeypatch.delenv(key, raising=False)
