"""Tests for k-combination generation.

Tests cover:
- Out-of-range sizes returning an empty result
- Singletons and the full roster
- Lexicographic order by input position
- C(n, k) counts
- Duplicate values and immutability of inputs and outputs
"""

from __future__ import annotations

import math

import pytest

from groupwise.combinatorial import combinations, count_combinations


# ============================================================
# Edge Cases
# ============================================================


class TestEdgeCases:
    """Sizes that produce no combinations."""

    def test_size_greater_than_length(self):
        assert combinations(["A", "B"], 3) == []

    def test_size_zero(self):
        assert combinations(["A", "B", "C"], 0) == []

    def test_negative_size(self):
        assert combinations(["A", "B"], -1) == []

    def test_empty_input(self):
        assert combinations([], 2) == []

    def test_empty_input_size_zero(self):
        assert combinations([], 0) == []


class TestSingletonsAndFull:
    """k == 1 and k == n."""

    def test_size_one(self):
        assert combinations(["A", "B", "C"], 1) == [["A"], ["B"], ["C"]]

    def test_single_item(self):
        assert combinations(["X"], 1) == [["X"]]

    def test_full_size(self):
        assert combinations(["A", "B", "C"], 3) == [["A", "B", "C"]]

    def test_full_size_is_a_copy(self):
        items = ["A", "B", "C"]
        result = combinations(items, 3)
        result[0].append("D")
        assert items == ["A", "B", "C"]


# ============================================================
# Ordering
# ============================================================


class TestOrdering:
    """Combinations come out in lexicographic order of input position."""

    def test_pairs_from_three(self):
        assert combinations(["A", "B", "C"], 2) == [
            ["A", "B"],
            ["A", "C"],
            ["B", "C"],
        ]

    def test_pairs_from_four(self, four_members):
        assert combinations(four_members, 2) == [
            ["A", "B"],
            ["A", "C"],
            ["A", "D"],
            ["B", "C"],
            ["B", "D"],
            ["C", "D"],
        ]

    def test_triplets_from_five(self, five_members):
        assert combinations(five_members, 3) == [
            ["A", "B", "C"],
            ["A", "B", "D"],
            ["A", "B", "E"],
            ["A", "C", "D"],
            ["A", "C", "E"],
            ["A", "D", "E"],
            ["B", "C", "D"],
            ["B", "C", "E"],
            ["B", "D", "E"],
            ["C", "D", "E"],
        ]

    def test_four_from_five(self, five_members):
        assert combinations(five_members, 4) == [
            ["A", "B", "C", "D"],
            ["A", "B", "C", "E"],
            ["A", "B", "D", "E"],
            ["A", "C", "D", "E"],
            ["B", "C", "D", "E"],
        ]

    def test_order_follows_position_not_value(self):
        # Reverse-sorted input keeps its own order inside each combination
        assert combinations(["C", "B", "A"], 2) == [["C", "B"], ["C", "A"], ["B", "A"]]

    def test_order_is_lexicographic_by_index(self):
        items = list(range(7))
        result = combinations(items, 3)
        assert result == sorted(result)
        assert all(combo == sorted(combo) for combo in result)


# ============================================================
# Counting
# ============================================================


class TestCounts:
    """len(combinations(items, k)) == C(n, k)."""

    @pytest.mark.parametrize("n", range(0, 8))
    def test_count_matches_binomial(self, n):
        items = [f"m{i}" for i in range(n)]
        for k in range(-1, n + 2):
            expected = math.comb(n, k) if 0 < k <= n else 0
            assert len(combinations(items, k)) == expected
            assert count_combinations(n, k) == expected

    def test_no_duplicate_combinations(self):
        items = [f"m{i}" for i in range(6)]
        result = combinations(items, 3)
        assert len({tuple(c) for c in result}) == len(result)

    def test_ten_choose_three(self):
        result = combinations([f"Item{i}" for i in range(10)], 3)
        assert len(result) == 120


# ============================================================
# Inputs and Outputs
# ============================================================


class TestImmutability:
    """Inputs are read-only and outputs are independent."""

    def test_input_not_modified(self):
        original = ["A", "B", "C"]
        combinations(original, 2)
        assert original == ["A", "B", "C"]

    def test_tuple_input(self):
        assert combinations(("A", "B", "C"), 2) == [["A", "B"], ["A", "C"], ["B", "C"]]

    def test_outputs_are_independent(self):
        result = combinations(["A", "B", "C"], 2)
        result[0][0] = "Modified"
        assert "Modified" not in result[1]
        assert "Modified" not in result[2]

    def test_singletons_are_independent(self):
        items = ["A", "B"]
        result = combinations(items, 1)
        result[0].append("Z")
        assert result[1] == ["B"]
        assert items == ["A", "B"]

    def test_duplicate_values_are_distinct_positions(self):
        assert combinations(["A", "A", "B"], 2) == [
            ["A", "A"],
            ["A", "B"],
            ["A", "B"],
        ]

    def test_typical_team_names(self, team):
        pairs = combinations(team, 2)
        assert len(pairs) == 6
        assert ["Alice", "Bob"] in pairs
        assert ["Charlie", "Diana"] in pairs
        assert ["Bob", "Alice"] not in pairs
