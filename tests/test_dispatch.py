"""Tests for the schedule dispatcher."""

from __future__ import annotations

import pytest

from groupwise.scheduling import generate_schedule, round_robin_groups, round_robin_pairs


class TestGenerateSchedule:
    """Routing by group size."""

    def test_pairs_use_circle_method(self, four_members):
        assert generate_schedule(four_members, 2) == round_robin_pairs(four_members)

    def test_pairs_for_odd_roster(self, five_members):
        assert generate_schedule(five_members, 2) == round_robin_pairs(five_members)

    def test_groups_use_heuristic(self, six_members):
        assert generate_schedule(six_members, 3) == round_robin_groups(six_members, 3)

    def test_threshold_is_passed_through(self):
        members = [f"m{i}" for i in range(9)]

        assert generate_schedule(members, 3, coverage_threshold=0.25) == round_robin_groups(
            members, 3, coverage_threshold=0.25
        )

    @pytest.mark.parametrize("size", [-2, 0])
    def test_non_positive_size_is_empty(self, four_members, size):
        assert generate_schedule(four_members, size) == []

    def test_size_above_roster_is_empty(self, four_members):
        assert generate_schedule(four_members, 5) == []

    def test_empty_roster(self):
        assert generate_schedule([], 2) == []

    def test_one_member_pairs(self):
        assert generate_schedule(["A"], 2) == []

    def test_size_one(self, four_members):
        assert generate_schedule(four_members, 1) == [[["A"], ["B"], ["C"], ["D"]]]

    def test_whole_roster(self, four_members):
        assert generate_schedule(four_members, 4) == [[["A", "B", "C", "D"]]]

    def test_does_not_raise_for_triples(self, five_members):
        schedule = generate_schedule(five_members, 3)

        assert schedule
        assert all(len(group) == 3 for rnd in schedule for group in rnd)
