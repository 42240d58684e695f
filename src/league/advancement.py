"""
Next-round court assignment.

A player's round place becomes their seed for the next round; the next
round's draw then tells which court that seed lands on.
"""
from typing import Dict, List, Union

from league.draw import block_groups
from league.models import Court, Draw, PlayerRankingRecord
from league.tiers import calculate_tier_draws

FINAL_ROUND = {
    'challenge': 2,
    'tiered': 3,
    'league': 3,
}


def final_round(format: str) -> int:
    return FINAL_ROUND.get(format, 0)


def _court_count(records: List[PlayerRankingRecord]) -> int:
    return len({record.court_number for record in records})


def next_round_draws(records: List[PlayerRankingRecord], current_round: int, format: str) -> List[Draw]:
    """Draws for the round after current_round, sized to the current courts."""
    court_count = _court_count(records)
    next_round = current_round + 1
    if format == 'challenge':
        return [Draw(seeds=seeds) for seeds in block_groups(court_count, len(records))]
    draws = calculate_tier_draws(court_count, next_round)
    if format == 'league':
        return [Draw(seeds=draw.seeds, tier=draw.tier[0]) for draw in draws]
    return draws


def assign_next_courts(records: List[PlayerRankingRecord], current_round: int, format: str,
                       by_seed: bool = False) -> List[PlayerRankingRecord]:
    """
    Return copies of records with next_court (and next_tier) filled in.

    Records for the final round of the format come back unchanged. With
    by_seed the current seed is used instead of the round place, which is
    how an unscored first round previews its next courts.
    """
    result = [record.copy() for record in records]
    if not result or current_round >= final_round(format):
        return result

    seed_to_court: Dict[int, int] = {}
    seed_to_tier: Dict[int, str] = {}
    for index, draw in enumerate(next_round_draws(result, current_round, format)):
        for seed in draw.seeds:
            seed_to_court[seed] = index + 1
            seed_to_tier[seed] = draw.tier

    for record in result:
        key = record.seed if by_seed else record.round_place
        record.next_court = seed_to_court.get(key, 0)
        record.next_tier = seed_to_tier.get(key)
    return result


def generate_next_round_courts(records: List[PlayerRankingRecord], current_round: int,
                               format: str = 'challenge') -> List[Court]:
    """Build the next round's courts from this round's places."""
    if not records or current_round >= final_round(format):
        return []

    by_place = {record.round_place: record.id for record in records}
    next_round = current_round + 1
    courts = []
    for index, draw in enumerate(next_round_draws(records, current_round, format)):
        courts.append(Court(
            court_number=index + 1,
            round_number=next_round,
            player_ids=[by_place.get(seed, '') for seed in draw.seeds],
            tier=draw.tier,
        ))
    return courts


# Hard-coded 16-player / 4-court night. Only valid for exactly that layout;
# every other roster goes through assign_next_courts().
FIXED_SNAKE_INDICES = [
    [0, 7, 8, 15],
    [1, 6, 9, 14],
    [2, 5, 10, 13],
    [3, 4, 11, 12],
]

FIXED_ROUND1_NEXT_COURT = {
    1: [1, 2, 3, 4],
    4: [1, 2, 3, 4],
    2: [2, 1, 4, 3],
    3: [2, 1, 4, 3],
}


def fixed_next_court(round_number: int, court_number: int, rank: int) -> Union[int, str]:
    """
    Next court on the fixed 16-player night, from the current court and the
    player's place on it. Returns 'DONE' after round 3 and 'TBD' otherwise.
    """
    if round_number == 1:
        destinations = FIXED_ROUND1_NEXT_COURT.get(court_number)
        if destinations and 1 <= rank <= 4:
            return destinations[rank - 1]
    elif round_number == 2:
        if court_number in (1, 2):
            return 1 if rank <= 2 else 2
        if court_number in (3, 4):
            return 3 if rank <= 2 else 4
    elif round_number == 3:
        return 'DONE'
    return 'TBD'


def fixed_snake_draw(ranked_player_ids: List[str]) -> List[Dict]:
    """Round 1 courts for the fixed 16-player night. Missing players are skipped."""
    courts = []
    for index, indices in enumerate(FIXED_SNAKE_INDICES):
        placed = [(i + 1, ranked_player_ids[i]) for i in indices if i < len(ranked_player_ids)]
        courts.append({
            'court_number': index + 1,
            'name': f"Court {index + 1}",
            'seeds': [seed for seed, _ in placed],
            'player_ids': [player_id for _, player_id in placed],
        })
    return courts
