class Player:
    def __init__(self, id, name=None, rating=None):
        self.id = id
        self.name = name if name else id
        self.rating = rating

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'rating': self.rating}

    @classmethod
    def from_dict(cls, data):
        return cls(id=str(data['id']), name=data.get('name'), rating=data.get('rating'))

    def __repr__(self):
        return f"Player(id={self.id}, name={self.name}, rating={self.rating})"


def seed_order(players):
    """Order a roster for initial seeding: rating descending, unrated players last.

    The sort is stable, so players with equal (or missing) ratings keep their
    roster order.
    """
    rated = [p for p in players if p.rating is not None]
    unrated = [p for p in players if p.rating is None]
    rated.sort(key=lambda p: -p.rating)
    return [p.id for p in rated + unrated]


class Draw:
    def __init__(self, seeds=None, tier=None):
        self.seeds = list(seeds) if seeds else []
        self.tier = tier

    def to_dict(self):
        data = {'seeds': list(self.seeds)}
        if self.tier is not None:
            data['tier'] = self.tier
        return data

    def __eq__(self, other):
        return isinstance(other, Draw) and self.seeds == other.seeds and self.tier == other.tier

    def __repr__(self):
        return f"Draw(seeds={self.seeds}, tier={self.tier})"


class Game:
    def __init__(self, team1, team2, round_number=None, team1_score=None, team2_score=None):
        self.team1 = tuple(team1)
        self.team2 = tuple(team2)
        self.round_number = round_number
        self.team1_score = team1_score
        self.team2_score = team2_score

    @property
    def is_complete(self):
        return self.team1_score is not None and self.team2_score is not None

    @property
    def players(self):
        return self.team1 + self.team2

    def with_scores(self, team1_score, team2_score):
        return Game(self.team1, self.team2, self.round_number, team1_score, team2_score)

    def to_dict(self):
        return {
            'team1': list(self.team1),
            'team2': list(self.team2),
            'round_number': self.round_number,
            'team1_score': self.team1_score,
            'team2_score': self.team2_score,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            team1=data['team1'],
            team2=data['team2'],
            round_number=data.get('round_number'),
            team1_score=data.get('team1_score'),
            team2_score=data.get('team2_score'),
        )

    def __repr__(self):
        return (f"Game(team1={self.team1}, team2={self.team2}, "
                f"score={self.team1_score}-{self.team2_score})")


class Court:
    def __init__(self, court_number, round_number, player_ids, tier=None, games=None):
        self.court_number = court_number
        self.round_number = round_number
        self.player_ids = list(player_ids)
        self.tier = tier
        self.games = list(games) if games else []

    def with_games(self, games):
        return Court(self.court_number, self.round_number, self.player_ids, self.tier, games)

    def to_dict(self):
        data = {
            'court_number': self.court_number,
            'round_number': self.round_number,
            'player_ids': list(self.player_ids),
            'games': [game.to_dict() for game in self.games],
        }
        if self.tier is not None:
            data['tier'] = self.tier
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            court_number=data['court_number'],
            round_number=data.get('round_number'),
            player_ids=data.get('player_ids', []),
            tier=data.get('tier'),
            games=[Game.from_dict(g) for g in data.get('games', [])],
        )

    def __repr__(self):
        return (f"Court(court_number={self.court_number}, round_number={self.round_number}, "
                f"player_ids={self.player_ids}, tier={self.tier})")


class PlayerRankingRecord:
    """Per-player result of one ranking pass. Never patched in place between passes."""

    def __init__(self, id, court_number, seed, tier=None):
        self.id = id
        self.court_number = court_number
        self.seed = seed
        self.tier = tier

        self.wins = 0
        self.losses = 0
        self.points_earned = 0
        self.points_against = 0
        self.court_place = 0

        self.round_place = 0
        self.next_court = 0
        self.next_tier = None

    @property
    def point_differential(self):
        return self.points_earned - self.points_against

    @property
    def point_win_rate(self):
        total = self.points_earned + self.points_against
        if total == 0:
            return 0
        return self.points_earned / total

    def copy(self):
        clone = PlayerRankingRecord(self.id, self.court_number, self.seed, self.tier)
        clone.wins = self.wins
        clone.losses = self.losses
        clone.points_earned = self.points_earned
        clone.points_against = self.points_against
        clone.court_place = self.court_place
        clone.round_place = self.round_place
        clone.next_court = self.next_court
        clone.next_tier = self.next_tier
        return clone

    def to_dict(self):
        return {
            'id': self.id,
            'court_number': self.court_number,
            'seed': self.seed,
            'tier': self.tier,
            'wins': self.wins,
            'losses': self.losses,
            'points_earned': self.points_earned,
            'points_against': self.points_against,
            'point_differential': self.point_differential,
            'point_win_rate': self.point_win_rate,
            'court_place': self.court_place,
            'round_place': self.round_place,
            'next_court': self.next_court,
            'next_tier': self.next_tier,
        }

    def __eq__(self, other):
        return isinstance(other, PlayerRankingRecord) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"PlayerRankingRecord(id={self.id}, seed={self.seed}, wins={self.wins}, "
                f"losses={self.losses}, round_place={self.round_place}, next_court={self.next_court})")
