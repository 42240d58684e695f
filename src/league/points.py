"""
League points awarded for a final rank.

Two curves are in use and are deliberately kept apart:

- the decay curve (points_for_rank) used for event results, and
- the flat per-court table (court_points_for_rank) used by the season
  standings, four ranks per court.
"""
from types import MappingProxyType
from typing import Dict, Mapping

MAX_RANK = 35

DECAY_BASE_POINTS = {1: 1000, 2: 700}
HALVING_LAG = 2
TENTH_START_RANK = 8
TENTH_LAG = 7

COURT_GROUPS = ('championship', 'court2', 'court3', 'court4')
RANKS_PER_COURT = 4

COURT_POINTS: Mapping[str, Mapping[int, int]] = {
    'championship': {1: 1000, 2: 800, 3: 600, 4: 500},
    'court2': {1: 400, 2: 350, 3: 300, 4: 250},
    'court3': {1: 200, 2: 175, 3: 150, 4: 125},
    'court4': {1: 100, 2: 80, 3: 60, 4: 40},
}

def _build_decay_table(max_rank: int) -> Mapping[int, int]:
    # Filled bottom-up; each rank only looks back at ranks already computed.
    table: Dict[int, int] = dict(DECAY_BASE_POINTS)
    for rank in range(len(DECAY_BASE_POINTS) + 1, max_rank + 1):
        if rank >= TENTH_START_RANK:
            table[rank] = table[rank - TENTH_LAG] // 10
        else:
            table[rank] = table[rank - HALVING_LAG] // 2
    return MappingProxyType(table)


DECAY_POINTS = _build_decay_table(MAX_RANK)


def points_for_rank(rank: int) -> int:
    """
    Decay curve: 1000, 700, then half of the points two ranks earlier;
    from rank 8 on, a tenth of the points seven ranks earlier.
    """
    if not isinstance(rank, int):
        return 0
    return DECAY_POINTS.get(rank, 0)


def court_points_for_rank(rank: int, table: Mapping[str, Mapping[int, int]] = None) -> int:
    """Flat lookup: ranks 1-4 use the championship row, 5-8 court2, and so on."""
    table = COURT_POINTS if table is None else table
    if not isinstance(rank, int) or rank < 1:
        return 0
    group_index, position = divmod(rank - 1, RANKS_PER_COURT)
    if group_index >= len(COURT_GROUPS):
        return 0
    row = table.get(COURT_GROUPS[group_index]) or {}
    value = row.get(position + 1)
    return value if isinstance(value, int) else 0


POINT_CURVES = {
    'decay': points_for_rank,
    'court': court_points_for_rank,
}
