"""
Fixed round-robin doubles schedules for 4- and 5-player courts.
"""
from typing import List, Optional

from league.allocation import InvalidPlayerCount
from league.models import Court, Game

# Positions are 0-based indexes into the court's player list.
# Every player partners every other player exactly once.
FOUR_PLAYER_GAMES = [
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
]

# Each player sits out exactly once.
FIVE_PLAYER_GAMES = [
    ((0, 1), (2, 3)),
    ((1, 2), (3, 4)),
    ((0, 2), (1, 4)),
    ((0, 3), (2, 4)),
    ((0, 4), (1, 3)),
]

GAME_TABLES = {
    4: FOUR_PLAYER_GAMES,
    5: FIVE_PLAYER_GAMES,
}


def generate_games(court: Court) -> List[Game]:
    """Return the games for a court, in play order."""
    table = GAME_TABLES.get(len(court.player_ids))
    if table is None:
        raise InvalidPlayerCount(
            f"Invalid number of players for game generation: {len(court.player_ids)}"
        )

    players = court.player_ids
    games = []
    for team1, team2 in table:
        games.append(Game(
            team1=[players[i] for i in team1],
            team2=[players[i] for i in team2],
            round_number=court.round_number,
        ))
    return games


def sit_outs(court: Court) -> List[Optional[str]]:
    """Return the player sitting out each game (None when everyone plays)."""
    games = generate_games(court)
    result = []
    for game in games:
        resting = [p for p in court.player_ids if p not in game.players]
        result.append(resting[0] if resting else None)
    return result
