"""
Unit tests for tier ranges, labels and tiered draws.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from league.allocation import InvalidPlayerCount
from league.tiers import (
    calculate_tier_draws, compare_tiers, generate_tier_courts, tier_court_count, tier_label,
    tier_label_for_court, tier_range_count, tier_sort_key,
)


class TestTierRangeCount:

    @pytest.mark.parametrize("courts", range(1, 10))
    def test_round_three_is_every_court(self, courts):
        assert tier_range_count(courts, 3) == courts

    @pytest.mark.parametrize("courts", range(1, 10))
    def test_non_increasing_toward_round_one(self, courts):
        assert tier_range_count(courts, 1) <= tier_range_count(courts, 2) <= tier_range_count(courts, 3)

    def test_known_values(self):
        assert tier_range_count(4, 2) == 2
        assert tier_range_count(4, 1) == 1
        assert tier_range_count(7, 2) == 3
        assert tier_range_count(7, 1) == 1
        assert tier_range_count(10, 1) == 2

    @pytest.mark.parametrize("round_number", [0, 4, -1])
    def test_invalid_round_raises(self, round_number):
        with pytest.raises(ValueError):
            tier_range_count(4, round_number)


class TestTierLabels:

    def test_single_and_range(self):
        assert tier_label(0, 0) == "A"
        assert tier_label(0, 2) == "A–C"
        assert tier_label(2, 3) == "C–D"

    def test_ordering(self):
        assert compare_tiers("A", "A–B") < 0
        assert compare_tiers("A–B", "B") < 0
        assert compare_tiers("B", "A–C") == 0
        assert compare_tiers("C", "B–D") == 0
        assert compare_tiers("D", "C") > 0

    def test_sort_key_is_average_code(self):
        assert tier_sort_key("A–C") == ord("B")

    def test_label_for_court(self):
        assert tier_label_for_court(4, 1, 3) == "A–D"
        assert tier_label_for_court(4, 2, 1) == "A–B"
        assert tier_label_for_court(4, 2, 4) == "C–D"
        assert tier_label_for_court(4, 3, 2) == "B"
        assert tier_label_for_court(4, 3, 5) == ""
        assert tier_label_for_court(4, 4, 1) == ""


class TestTierDraws:

    def test_four_courts_round_one(self):
        draws = calculate_tier_draws(4, 1)
        assert [d.seeds for d in draws] == [
            [1, 8, 9, 16], [2, 7, 10, 15], [3, 6, 11, 14], [4, 5, 12, 13],
        ]
        assert {d.tier for d in draws} == {"A–D"}

    def test_four_courts_round_two(self):
        draws = calculate_tier_draws(4, 2)
        assert [d.seeds for d in draws] == [
            [1, 4, 5, 8], [2, 3, 6, 7], [9, 12, 13, 16], [10, 11, 14, 15],
        ]
        assert [d.tier for d in draws] == ["A–B", "A–B", "C–D", "C–D"]

    def test_four_courts_round_three(self):
        draws = calculate_tier_draws(4, 3)
        assert [d.seeds for d in draws] == [
            [1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16],
        ]
        assert [d.tier for d in draws] == ["A", "B", "C", "D"]

    def test_three_courts_round_two_is_one_tier(self):
        draws = calculate_tier_draws(3, 2)
        assert [d.seeds for d in draws] == [[1, 6, 7, 12], [2, 5, 8, 11], [3, 4, 9, 10]]
        assert [d.tier for d in draws] == ["A–C"] * 3

    def test_soft_failures(self):
        assert calculate_tier_draws(0, 1) == []
        assert calculate_tier_draws(4, 4) == []


class TestTierCourts:

    def test_sixteen_players(self):
        ids = [f"p{i}" for i in range(1, 17)]
        courts = generate_tier_courts(ids, 1)
        assert courts[0].player_ids == ["p1", "p8", "p9", "p16"]
        assert courts[0].tier == "A–D"

    @pytest.mark.parametrize("total", [0, 10, 32])
    def test_invalid_roster_raises(self, total):
        with pytest.raises(InvalidPlayerCount):
            generate_tier_courts([f"p{i}" for i in range(total)], 1)


class TestTierCourtCount:

    def test_valid_rosters(self):
        assert tier_court_count(4) == 1
        assert tier_court_count(28) == 7

    @pytest.mark.parametrize("total", [0, -4, 10, 32, 40])
    def test_invalid_rosters_raise(self, total):
        with pytest.raises(InvalidPlayerCount):
            tier_court_count(total)
