"""
Player rankings from scored courts.

Three event formats rank players differently and are kept as separate
strategies behind calculate_player_rankings():

- challenge: two rounds of 4/5-player courts, ranked by point win rate.
  Round 2 ranks by court first, since the round 2 draw already encodes
  round 1 results. A tied game is a loss for both teams; this intentionally
  does not follow the team-1 tie rule of the tiered format.
- tiered: three rounds of 4-player courts grouped into tiers. Ranked by
  tier, then place within the court. A tied game counts as a win for team 1.
- league: the weekly league calculator. Round place is pure performance
  (wins, differential, seed); the listing is grouped by division and court
  place. A tied game is a loss for both teams.

Every call recomputes all records from the full game set.
"""
from typing import Dict, List, Sequence

from league.advancement import assign_next_courts
from league.allocation import COURT_SIZES
from league.draw import block_groups, snake_groups
from league.models import Court, PlayerRankingRecord
from league.tiers import calculate_tier_draws, tier_sort_key

RANKING_ROUNDS = (1, 2, 3)

TIE_TEAM1_WINS = 'team1_wins'
TIE_NO_WINNER = 'no_winner'


class RankingStrategy:
    format = None
    tie_policy = TIE_NO_WINNER

    def seed_groups(self, courts: Sequence[Court], round_number: int):
        """Return (seeds, tier) for each court, in court order."""
        raise NotImplementedError

    def order(self, records: List[PlayerRankingRecord], round_number: int) -> List[PlayerRankingRecord]:
        raise NotImplementedError

    def team1_wins(self, team1_score, team2_score) -> bool:
        if team1_score == team2_score:
            return self.tie_policy == TIE_TEAM1_WINS
        return team1_score > team2_score

    def team2_wins(self, team1_score, team2_score) -> bool:
        if team1_score == team2_score:
            return False
        return team2_score > team1_score

    def build_records(self, courts: Sequence[Court], round_number: int):
        groups = self.seed_groups(courts, round_number)
        court_numbers = [court.court_number for court in courts]
        if len(groups) != len(courts) or len(set(court_numbers)) != len(court_numbers):
            return None
        if any(len(court.player_ids) not in COURT_SIZES for court in courts):
            return None

        records = []
        for court, (seeds, tier) in zip(courts, groups):
            if len(seeds) != len(court.player_ids):
                return None
            for player_id, seed in zip(court.player_ids, seeds):
                records.append(PlayerRankingRecord(player_id, court.court_number, seed, tier))
        return records

    def tally(self, courts: Sequence[Court], records: List[PlayerRankingRecord]):
        by_court: Dict[int, Dict[str, PlayerRankingRecord]] = {}
        for record in records:
            by_court.setdefault(record.court_number, {})[record.id] = record

        for court in courts:
            court_records = by_court.get(court.court_number, {})
            for game in court.games:
                if not game.is_complete:
                    continue
                s1, s2 = game.team1_score, game.team2_score
                sides = (
                    (game.team1, s1, s2, self.team1_wins(s1, s2)),
                    (game.team2, s2, s1, self.team2_wins(s1, s2)),
                )
                for team, score, opponent_score, won in sides:
                    for player_id in team:
                        record = court_records.get(player_id)
                        if record is None:
                            continue
                        record.points_earned += score
                        record.points_against += opponent_score
                        if won:
                            record.wins += 1
                        else:
                            record.losses += 1

    def rank(self, courts: Sequence[Court], round_number: int) -> List[PlayerRankingRecord]:
        records = self.build_records(courts, round_number)
        if records is None:
            return []
        self.tally(courts, records)
        ranked = self.order(records, round_number)
        return assign_next_courts(ranked, round_number, self.format,
                                  by_seed=self.advance_by_seed(courts, round_number))

    def advance_by_seed(self, courts: Sequence[Court], round_number: int) -> bool:
        return False


def _performance_key(record: PlayerRankingRecord):
    return (-record.wins, -record.point_differential, record.seed)


def assign_court_places(records: List[PlayerRankingRecord]):
    """Place players within their own court by wins, differential, then seed."""
    by_court: Dict[int, List[PlayerRankingRecord]] = {}
    for record in records:
        by_court.setdefault(record.court_number, []).append(record)
    for court_records in by_court.values():
        for place, record in enumerate(sorted(court_records, key=_performance_key), start=1):
            record.court_place = place


def _number_places(records: List[PlayerRankingRecord]):
    for place, record in enumerate(records, start=1):
        record.round_place = place


class ChallengeRanking(RankingStrategy):
    format = 'challenge'
    tie_policy = TIE_NO_WINNER

    def seed_groups(self, courts, round_number):
        total_players = sum(len(court.player_ids) for court in courts)
        if round_number == 1:
            groups = snake_groups(len(courts), total_players)
        else:
            groups = block_groups(len(courts), total_players)
        return [(seeds, None) for seeds in groups]

    def order(self, records, round_number):
        def key(record):
            court_key = record.court_number if round_number == 2 else 0
            return (court_key, -record.point_win_rate, record.seed)

        ranked = sorted(records, key=key)
        _number_places(ranked)
        return ranked


class TieredRanking(RankingStrategy):
    format = 'tiered'
    tie_policy = TIE_TEAM1_WINS

    def seed_groups(self, courts, round_number):
        return [(draw.seeds, draw.tier) for draw in calculate_tier_draws(len(courts), round_number)]

    def order(self, records, round_number):
        assign_court_places(records)
        ranked = sorted(records, key=lambda r: (tier_sort_key(r.tier), r.court_place) + _performance_key(r))
        _number_places(ranked)
        return ranked


class LeagueRanking(RankingStrategy):
    format = 'league'
    tie_policy = TIE_NO_WINNER

    def seed_groups(self, courts, round_number):
        # Divisions are the first letter of the tier label.
        return [(draw.seeds, draw.tier[0]) for draw in calculate_tier_draws(len(courts), round_number)]

    def order(self, records, round_number):
        assign_court_places(records)
        _number_places(sorted(records, key=_performance_key))
        return sorted(records, key=lambda r: (r.tier, r.court_place) + _performance_key(r))

    def advance_by_seed(self, courts, round_number):
        if round_number != 1:
            return False
        return not any(game.is_complete for court in courts for game in court.games)


STRATEGIES = {
    'challenge': ChallengeRanking(),
    'tiered': TieredRanking(),
    'league': LeagueRanking(),
}

FORMATS = tuple(STRATEGIES)


def calculate_player_rankings(courts: Sequence[Court], round_number: int,
                              format: str = 'challenge') -> List[PlayerRankingRecord]:
    """
    Rank every player across all courts of a round.

    Games missing either score are ignored. Invalid input (no courts,
    unknown format or round, courts that do not match the round's draw)
    returns an empty list.
    """
    if not courts or round_number not in RANKING_ROUNDS:
        return []
    strategy = STRATEGIES.get(format)
    if strategy is None:
        return []
    return strategy.rank(courts, round_number)
