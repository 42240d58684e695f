"""
Seed draws for a league night.

Round 1 uses a snake draw so each court gets a spread of strong and weak
seeds. Later rounds fill courts in contiguous blocks so the strongest
players meet on court 1.
"""
from typing import List

from league.allocation import InvalidPlayerCount, allocate_courts
from league.models import Court, Draw


def snake_groups(court_count: int, total_seeds: int, start_seed: int = 1) -> List[List[int]]:
    """
    Deal seeds start_seed..start_seed+total_seeds-1 across courts, bouncing
    direction at either end.

    With 3 courts and 12 seeds: [1, 6, 7, 12], [2, 5, 8, 11], [3, 4, 9, 10]
    """
    groups = [[] for _ in range(court_count)]
    if court_count <= 0:
        return groups

    court_index = 0
    direction = 1
    for seed in range(start_seed, start_seed + total_seeds):
        groups[court_index].append(seed)
        court_index += direction
        if court_index == court_count or court_index == -1:
            direction *= -1
            court_index += direction
    return groups


def block_groups(court_count: int, total_seeds: int, start_seed: int = 1) -> List[List[int]]:
    """Fill courts with consecutive seeds; earlier courts take the remainder."""
    groups = []
    if court_count <= 0:
        return groups

    base_size, remainder = divmod(total_seeds, court_count)
    seed = start_seed
    for court_index in range(court_count):
        size = base_size + (1 if court_index < remainder else 0)
        groups.append(list(range(seed, seed + size)))
        seed += size
    return groups


def generate_draw(total_players: int, round_number: int, preferred_size: int = 5) -> List[Draw]:
    """Return one Draw per court for the given round."""
    court_count = allocate_courts(total_players, preferred_size)
    if round_number == 1:
        groups = snake_groups(court_count, total_players)
    elif round_number >= 2:
        groups = block_groups(court_count, total_players)
    else:
        raise ValueError(f"Invalid round number: {round_number}")
    return [Draw(seeds=seeds) for seeds in groups]


def generate_courts(player_ids: List[str], round_number: int, preferred_size: int = 5) -> List[Court]:
    """
    Place players on courts for a round.

    player_ids must already be in seed order: player_ids[0] is seed 1.
    """
    if len(set(player_ids)) != len(player_ids):
        raise InvalidPlayerCount("Duplicate player ids in roster")

    draws = generate_draw(len(player_ids), round_number, preferred_size)
    courts = []
    for index, draw in enumerate(draws):
        courts.append(Court(
            court_number=index + 1,
            round_number=round_number,
            player_ids=[player_ids[seed - 1] for seed in draw.seeds],
        ))
    return courts
