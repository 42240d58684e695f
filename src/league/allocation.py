"""
Court allocation: split a roster into courts of four or five players.
"""
from typing import Dict, List, Optional, Tuple

MAX_COURTS = 7
COURT_SIZES = (4, 5)


class InvalidPlayerCount(ValueError):
    """Raised when players cannot be split into legal courts."""


def _other_size(preferred_size: int) -> int:
    return 4 if preferred_size == 5 else 5


def _find_court_sizes(total_players: int, preferred_size: int) -> Optional[List[int]]:
    """
    Backtracking search for a list of court sizes summing to total_players.

    Each step tries the preferred size first and falls back to the other
    size, so the first allocation found is always the same for a given input.
    Results are memoized on (players_left, courts_used).
    """
    other_size = _other_size(preferred_size)
    memo: Dict[Tuple[int, int], Optional[List[int]]] = {}

    def search(players_left: int, courts_used: int) -> Optional[List[int]]:
        if players_left == 0:
            return []
        if players_left < 0 or courts_used >= MAX_COURTS:
            return None
        key = (players_left, courts_used)
        if key in memo:
            return memo[key]

        result = None
        for size in (preferred_size, other_size):
            rest = search(players_left - size, courts_used + 1)
            if rest is not None:
                result = [size] + rest
                break
        memo[key] = result
        return result

    return search(total_players, 0)


def court_sizes(total_players: int, preferred_size: int = 5) -> List[int]:
    """Return the court sizes chosen for total_players, in allocation order."""
    if preferred_size not in COURT_SIZES:
        raise InvalidPlayerCount(f"Preferred court size must be 4 or 5, got {preferred_size}")
    if not isinstance(total_players, int) or total_players <= 0:
        raise InvalidPlayerCount(f"Invalid number of players for court allocation: {total_players}")

    sizes = _find_court_sizes(total_players, preferred_size)
    if not sizes:
        raise InvalidPlayerCount(f"Invalid number of players for court allocation: {total_players}")
    return sizes


def allocate_courts(total_players: int, preferred_size: int = 5) -> int:
    """Return the number of courts needed for total_players."""
    return len(court_sizes(total_players, preferred_size))


def is_valid_number_of_players(total_players: int) -> bool:
    try:
        allocate_courts(total_players, 5)
        return True
    except InvalidPlayerCount:
        return False
