"""Tests for boat load enumeration."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from rivercross.world import Load, load_combinations, move_table


class TestLoadCombinations:
    def test_full_bank_order(self) -> None:
        assert load_combinations(3, 3, 2) == (
            Load(2, 0),
            Load(1, 1),
            Load(0, 2),
            Load(1, 0),
            Load(0, 1),
        )

    def test_loads_limited_by_availability(self) -> None:
        assert load_combinations(1, 2, 2) == (Load(1, 1), Load(0, 2), Load(1, 0), Load(0, 1))
        assert load_combinations(0, 1, 2) == (Load(0, 1),)
        assert load_combinations(1, 0, 2) == (Load(1, 0),)

    def test_empty_bank(self) -> None:
        assert load_combinations(0, 0, 2) == ()

    def test_rowboat(self) -> None:
        assert load_combinations(3, 3, 1) == (Load(1, 0), Load(0, 1))

    @given(
        c=st.integers(min_value=0, max_value=5),
        m=st.integers(min_value=0, max_value=5),
        capacity=st.integers(min_value=1, max_value=4),
    )
    def test_every_load_is_legal_and_unique(self, c: int, m: int, capacity: int) -> None:
        loads = load_combinations(c, m, capacity)
        assert len(set(loads)) == len(loads)
        for load in loads:
            assert 1 <= load.size <= capacity
            assert 0 <= load.cannibals <= c
            assert 0 <= load.missionaries <= m

    @given(
        c=st.integers(min_value=0, max_value=5),
        m=st.integers(min_value=0, max_value=5),
        capacity=st.integers(min_value=1, max_value=4),
    )
    def test_no_legal_load_is_missing(self, c: int, m: int, capacity: int) -> None:
        expected = {
            (a, b)
            for a in range(c + 1)
            for b in range(m + 1)
            if 1 <= a + b <= capacity
        }
        assert {tuple(load) for load in load_combinations(c, m, capacity)} == expected


class TestMoveTable:
    def test_table_matches_generator(self) -> None:
        table = move_table(3, 3, 2)
        assert len(table) == 16
        for (c, m), loads in table.items():
            assert loads == load_combinations(c, m, 2)

    def test_table_is_cached(self) -> None:
        assert move_table(3, 3, 2) is move_table(3, 3, 2)

    def test_single_cannibal_with_missionaries(self) -> None:
        assert Load(1, 1) in move_table(3, 3, 2)[(1, 2)]
        assert Load(2, 0) not in move_table(3, 3, 2)[(1, 2)]
