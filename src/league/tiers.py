"""
Tiers for the three-round league format.

Round 3 plays every court as its own tier (A, B, C, ...). Earlier rounds merge
courts into coarser tiers, three tiers at a time, so round 1 with four courts
is a single tier "A–D" and round 2 has tiers "A–B" and "C–D".
"""
import math
from typing import List

from league.allocation import MAX_COURTS, InvalidPlayerCount
from league.draw import snake_groups
from league.models import Court, Draw

PLAYERS_PER_COURT = 4
TIER_RANGE_SEPARATOR = '–'
TIER_ROUNDS = (1, 2, 3)


def tier_range_count(total_courts: int, round_number: int) -> int:
    """Number of tiers in play for a round."""
    if round_number == 3:
        return total_courts
    if round_number in (1, 2):
        return math.ceil(tier_range_count(total_courts, round_number + 1) / 3)
    raise ValueError(f"Invalid round number: {round_number}")


def tier_letter(index: int) -> str:
    return chr(ord('A') + index)


def tier_label(start_index: int, end_index: int) -> str:
    """Label for courts start_index..end_index (0-based), e.g. 'A' or 'A–C'."""
    if start_index == end_index:
        return tier_letter(start_index)
    return f"{tier_letter(start_index)}{TIER_RANGE_SEPARATOR}{tier_letter(end_index)}"


def tier_sort_key(label: str) -> float:
    """
    Average character code of a tier's endpoints.

    A < A–B < B == A–C < C == B–D
    """
    if TIER_RANGE_SEPARATOR in label:
        start, end = label.split(TIER_RANGE_SEPARATOR)
        return (ord(start[0]) + ord(end[0])) / 2
    return ord(label[0])


def compare_tiers(a: str, b: str) -> float:
    """Negative when tier a ranks above tier b, zero when they rank equal."""
    return tier_sort_key(a) - tier_sort_key(b)


def _tier_ranges(total_courts: int, round_number: int) -> List[range]:
    range_count = tier_range_count(total_courts, round_number)
    base_size, remainder = divmod(total_courts, range_count)
    ranges = []
    start = 0
    for index in range(range_count):
        size = base_size + (1 if index < remainder else 0)
        ranges.append(range(start, start + size))
        start += size
    return ranges


def calculate_tier_draws(total_courts: int, round_number: int,
                         players_per_court: int = PLAYERS_PER_COURT) -> List[Draw]:
    """
    Seed draws for the tiered format.

    Courts are split into contiguous tier ranges; each range is snake-seeded
    on its own, continuing from the last seed of the range above it.
    """
    if total_courts <= 0 or round_number not in TIER_ROUNDS:
        return []

    draws = []
    seed_start = 1
    for court_range in _tier_ranges(total_courts, round_number):
        label = tier_label(court_range[0], court_range[-1])
        seats = len(court_range) * players_per_court
        for seeds in snake_groups(len(court_range), seats, seed_start):
            draws.append(Draw(seeds=seeds, tier=label))
        seed_start += seats
    return draws


def tier_court_count(total_players: int) -> int:
    """Number of 4-player courts for a tiered roster; raises InvalidPlayerCount."""
    if (total_players <= 0 or total_players % PLAYERS_PER_COURT
            or total_players // PLAYERS_PER_COURT > MAX_COURTS):
        raise InvalidPlayerCount(
            f"Tiered events need a multiple of {PLAYERS_PER_COURT} players "
            f"(at most {MAX_COURTS * PLAYERS_PER_COURT}), got {total_players}"
        )
    return total_players // PLAYERS_PER_COURT


def generate_tier_courts(player_ids: List[str], round_number: int) -> List[Court]:
    """Place a seed-ordered roster on 4-player tiered courts."""
    if round_number not in TIER_ROUNDS:
        raise ValueError(f"Invalid round number: {round_number}")
    court_count = tier_court_count(len(player_ids))
    if len(set(player_ids)) != len(player_ids):
        raise InvalidPlayerCount("Duplicate player ids in roster")

    courts = []
    for index, draw in enumerate(calculate_tier_draws(court_count, round_number)):
        courts.append(Court(
            court_number=index + 1,
            round_number=round_number,
            player_ids=[player_ids[seed - 1] for seed in draw.seeds],
            tier=draw.tier,
        ))
    return courts


def tier_label_for_court(total_courts: int, round_number: int, court_number: int) -> str:
    """Tier label of a 1-based court for a round, or '' when out of range."""
    if round_number not in TIER_ROUNDS or not 1 <= court_number <= total_courts:
        return ''
    for court_range in _tier_ranges(total_courts, round_number):
        if court_number - 1 in court_range:
            return tier_label(court_range[0], court_range[-1])
    return ''
