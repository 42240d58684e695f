"""
Unit tests for the two point curves.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from league.points import DECAY_POINTS, MAX_RANK, POINT_CURVES, court_points_for_rank, points_for_rank


class TestDecayCurve:

    def test_known_values(self):
        expected = [1000, 700, 500, 350, 250, 175, 125, 100, 70, 50, 35, 25]
        assert [points_for_rank(r) for r in range(1, 13)] == expected

    def test_non_increasing(self):
        values = [points_for_rank(r) for r in range(1, MAX_RANK + 2)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("rank", [0, -1, MAX_RANK + 1, 1000])
    def test_out_of_range_is_zero(self, rank):
        assert points_for_rank(rank) == 0

    def test_non_integer_rank_is_zero(self):
        assert points_for_rank(None) == 0
        assert points_for_rank(1.5) == 0

    def test_table_built_up_front(self):
        assert len(DECAY_POINTS) == MAX_RANK
        assert DECAY_POINTS[MAX_RANK] == points_for_rank(MAX_RANK)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DECAY_POINTS[MAX_RANK + 1] = 1
        points_for_rank(MAX_RANK + 5)
        assert MAX_RANK + 5 not in DECAY_POINTS


class TestCourtTable:

    def test_championship_row(self):
        assert court_points_for_rank(1) == 1000
        assert court_points_for_rank(2) == 800
        assert court_points_for_rank(3) == 600

    def test_groups_of_four(self):
        assert court_points_for_rank(5) == 400
        assert court_points_for_rank(9) == 200
        assert court_points_for_rank(16) == 40

    @pytest.mark.parametrize("rank", [0, -3, 17, 40])
    def test_out_of_range_is_zero(self, rank):
        assert court_points_for_rank(rank) == 0

    def test_custom_table_with_missing_rows(self):
        table = {'championship': {1: 50, 2: 30}}
        assert court_points_for_rank(1, table) == 50
        assert court_points_for_rank(3, table) == 0
        assert court_points_for_rank(5, table) == 0


class TestNamedCurves:

    def test_curves_are_separate(self):
        assert POINT_CURVES['decay'](2) == 700
        assert POINT_CURVES['court'](2) == 800
