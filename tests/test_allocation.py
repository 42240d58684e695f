"""
Unit tests for court allocation.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from league.allocation import (
    MAX_COURTS, InvalidPlayerCount, allocate_courts, court_sizes, is_valid_number_of_players,
)


class TestAllocateCourts:
    """Tests for allocate_courts()."""

    @pytest.mark.parametrize("total", [0, 6, 7])
    @pytest.mark.parametrize("preferred", [4, 5])
    def test_unsplittable_counts_raise(self, total, preferred):
        """0, 6 and 7 players can never be split into fours and fives."""
        with pytest.raises(InvalidPlayerCount):
            allocate_courts(total, preferred)

    @pytest.mark.parametrize("total,expected", [
        (4, 1), (5, 1), (8, 2), (10, 2), (12, 3), (15, 3),
        (16, 4), (20, 4), (28, 6), (35, 7),
    ])
    def test_preferred_five(self, total, expected):
        assert allocate_courts(total, 5) == expected

    def test_preferred_four(self):
        assert allocate_courts(20, 4) == 5
        assert allocate_courts(28, 4) == 7

    @pytest.mark.parametrize("total", [36, 37])
    def test_more_than_max_courts_raises(self, total):
        with pytest.raises(InvalidPlayerCount):
            allocate_courts(total, 4)

    def test_negative_count_raises(self):
        with pytest.raises(InvalidPlayerCount):
            allocate_courts(-4, 5)

    def test_invalid_preferred_size_raises(self):
        with pytest.raises(InvalidPlayerCount):
            allocate_courts(12, 6)

    def test_error_message_is_readable(self):
        with pytest.raises(InvalidPlayerCount, match="Invalid number of players"):
            allocate_courts(7, 5)

    def test_invalid_player_count_is_value_error(self):
        with pytest.raises(ValueError):
            allocate_courts(6, 5)

    def test_first_allocation_found_wins(self):
        """Fives are used until the remainder forces fours."""
        assert court_sizes(28, 5) == [5, 5, 5, 5, 4, 4]


class TestCourtSizes:
    """Tests for the 4/5 mix behind the court count."""

    @pytest.mark.parametrize("total", [n for n in range(4, 36) if n not in (6, 7)])
    @pytest.mark.parametrize("preferred", [4, 5])
    def test_sizes_sum_to_total(self, total, preferred):
        try:
            sizes = court_sizes(total, preferred)
        except InvalidPlayerCount:
            return
        assert sum(sizes) == total
        assert set(sizes) <= {4, 5}
        assert len(sizes) <= MAX_COURTS

    def test_preferred_size_tried_first(self):
        assert court_sizes(14, 5) == [5, 5, 4]
        assert court_sizes(14, 4) == [4, 5, 5]

    def test_eleven_players_has_no_mix(self):
        """No combination of fours and fives adds up to 11."""
        with pytest.raises(InvalidPlayerCount):
            court_sizes(11, 5)


class TestIsValidNumberOfPlayers:

    def test_valid_and_invalid(self):
        assert is_valid_number_of_players(10) is True
        assert is_valid_number_of_players(35) is True
        assert is_valid_number_of_players(0) is False
        assert is_valid_number_of_players(7) is False
        assert is_valid_number_of_players(36) is False
