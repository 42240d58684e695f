"""
Flask web application for League Night.

Stores the roster, settings and event rounds as YAML files and exposes the
draw / schedule / ranking engine as a JSON API.
"""
import os
import yaml
from datetime import datetime
from filelock import FileLock
from flask import Flask, request, jsonify
from league.allocation import InvalidPlayerCount
from league.advancement import final_round, generate_next_round_courts
from league.draw import generate_courts, generate_draw
from league.models import Court, Player, seed_order
from league.points import POINT_CURVES
from league.rankings import FORMATS, calculate_player_rankings
from league.schedule import generate_games
from league.standings import season_stats
from league.tiers import calculate_tier_draws, generate_tier_courts, tier_court_count

app = Flask(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.environ.get('LEAGUE_DATA_DIR', os.path.join(BASE_DIR, 'data'))

app.secret_key = os.environ.get('SECRET_KEY', 'league-night-dev')

SETTINGS_FILE = os.path.join(DATA_DIR, 'settings.yaml')
PLAYERS_FILE = os.path.join(DATA_DIR, 'players.yaml')
EVENT_FILE = os.path.join(DATA_DIR, 'event.yaml')
SEASON_FILE = os.path.join(DATA_DIR, 'season.yaml')

os.makedirs(DATA_DIR, exist_ok=True)
_data_lock = FileLock(os.path.join(DATA_DIR, '.lock'), timeout=10)


class EditPolicy:
    """Which rounds still accept score edits."""

    def __init__(self, locked_rounds=None):
        self.locked_rounds = set(locked_rounds or [])

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.get('locked_rounds', []))

    def can_edit(self, round_number):
        return round_number not in self.locked_rounds

    def __repr__(self):
        return f"EditPolicy(locked_rounds={sorted(self.locked_rounds)})"


def get_default_settings():
    """Return default settings."""
    return {
        'league_name': 'Paddle Up League',
        'event_format': 'challenge',
        'preferred_court_size': 5,
        'points_curve': 'decay',
        'locked_rounds': [],
        'court_points': None,
    }


def _load_yaml(path, default):
    if not os.path.exists(path):
        return default
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        app.logger.warning(f'Failed to parse {path}: {e}')
        return default
    return data if data else default


def _save_yaml(path, data):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def load_settings():
    """Load settings from YAML file, merging with defaults."""
    data = _load_yaml(SETTINGS_FILE, {})
    settings = get_default_settings()
    settings.update(data)
    return settings


def save_settings(settings):
    _save_yaml(SETTINGS_FILE, settings)


def load_players():
    """Load the roster as a list of Player."""
    data = _load_yaml(PLAYERS_FILE, [])
    return [Player.from_dict(p) for p in data]


def save_players(players):
    _save_yaml(PLAYERS_FILE, [p.to_dict() for p in players])


def load_event():
    """Load event rounds from YAML file."""
    data = _load_yaml(EVENT_FILE, {})
    data.setdefault('rounds', {})
    data.setdefault('final_standings', [])
    return data


def save_event(event):
    _save_yaml(EVENT_FILE, event)


def load_season():
    data = _load_yaml(SEASON_FILE, {})
    data.setdefault('weeks', [])
    return data


def save_season(season):
    _save_yaml(SEASON_FILE, season)


def get_round_courts(event, round_number):
    round_data = event['rounds'].get(round_number) or {}
    return [Court.from_dict(c) for c in round_data.get('courts', [])]


def rank_round(event, round_number, settings):
    courts = get_round_courts(event, round_number)
    return calculate_player_rankings(courts, round_number, settings['event_format'])


def points_for(settings, rank):
    curve = settings.get('points_curve', 'decay')
    if curve == 'court':
        return POINT_CURVES['court'](rank, settings.get('court_points'))
    return POINT_CURVES['decay'](rank)


def rankings_payload(records, round_number, settings):
    is_final = round_number >= final_round(settings['event_format'])
    payload = []
    for record in records:
        row = record.to_dict()
        if is_final:
            row['points'] = points_for(settings, record.round_place)
        payload.append(row)
    return payload


def build_round_courts(event, round_number, settings):
    """Courts for a round: roster seeding for round 1, previous places after that."""
    event_format = settings['event_format']
    if round_number == 1:
        player_ids = seed_order(load_players())
        if event_format == 'challenge':
            return generate_courts(player_ids, 1, settings['preferred_court_size'])
        return generate_tier_courts(player_ids, 1)

    if round_number > final_round(event_format):
        raise ValueError(f'Round {round_number} is past the final round of a {event_format} event')
    previous = rank_round(event, round_number - 1, settings)
    if not previous:
        raise ValueError(f'Round {round_number - 1} has not been generated')
    return generate_next_round_courts(previous, round_number - 1, event_format)


@app.route('/api/settings', methods=['GET'])
def api_settings():
    return jsonify(load_settings())


@app.route('/api/settings/update', methods=['POST'])
def api_update_settings():
    """Update settings. Unknown keys are ignored."""
    data = request.get_json() or {}
    with _data_lock:
        settings = load_settings()
        defaults = get_default_settings()
        for key, value in data.items():
            if key in defaults:
                settings[key] = value
        if settings['event_format'] not in FORMATS:
            return jsonify({'error': f"Unknown event format: {settings['event_format']}"}), 400
        if settings['preferred_court_size'] not in (4, 5):
            return jsonify({'error': 'Preferred court size must be 4 or 5'}), 400
        if settings['points_curve'] not in POINT_CURVES:
            return jsonify({'error': f"Unknown points curve: {settings['points_curve']}"}), 400
        save_settings(settings)
    return jsonify({'success': True, 'settings': settings})


@app.route('/api/players', methods=['GET', 'POST'])
def api_players():
    """Get or replace the roster."""
    if request.method == 'GET':
        return jsonify([p.to_dict() for p in load_players()])

    data = request.get_json() or {}
    entries = data.get('players', [])
    players = []
    for entry in entries:
        if isinstance(entry, str):
            entry = {'id': entry}
        if not entry.get('id'):
            return jsonify({'error': 'Every player needs an id'}), 400
        players.append(Player.from_dict(entry))
    if len({p.id for p in players}) != len(players):
        return jsonify({'error': 'Duplicate player ids'}), 400

    with _data_lock:
        save_players(players)
    return jsonify({'success': True, 'count': len(players)})


@app.route('/api/draw', methods=['GET'])
def api_draw():
    """Preview the seed draw for a player count."""
    total = request.args.get('players', type=int)
    round_number = request.args.get('round', 1, type=int)
    size = request.args.get('size', 5, type=int)
    event_format = request.args.get('format', 'challenge')
    if total is None:
        return jsonify({'error': 'Missing players count'}), 400

    try:
        if event_format == 'challenge':
            draws = generate_draw(total, round_number, size)
        else:
            draws = calculate_tier_draws(tier_court_count(total), round_number)
    except (InvalidPlayerCount, ValueError) as e:
        return jsonify({'error': str(e)}), 400
    if not draws:
        return jsonify({'error': f'No {event_format} draw for {total} players in round {round_number}'}), 400

    return jsonify({
        'courts': len(draws),
        'court_sizes': [len(d.seeds) for d in draws],
        'draws': [d.to_dict() for d in draws],
    })


@app.route('/api/rounds/<int:round_number>/generate', methods=['POST'])
def api_generate_round(round_number):
    """Generate courts and games for a round, replacing any stored round."""
    with _data_lock:
        settings = load_settings()
        event = load_event()
        try:
            courts = build_round_courts(event, round_number, settings)
        except (InvalidPlayerCount, ValueError) as e:
            app.logger.warning(f'Round {round_number} generation failed: {e}')
            return jsonify({'error': str(e)}), 400

        courts = [court.with_games(generate_games(court)) for court in courts]
        event['rounds'][round_number] = {
            'courts': [c.to_dict() for c in courts],
            'generated': datetime.now().isoformat(),
        }
        # Later rounds were seeded from the old results.
        for later in [r for r in event['rounds'] if r > round_number]:
            event['rounds'].pop(later)
        event['final_standings'] = []
        save_event(event)

    app.logger.info(f'Generated round {round_number}: {len(courts)} courts')
    return jsonify({'success': True, 'courts': [c.to_dict() for c in courts]})


@app.route('/api/rounds/<int:round_number>', methods=['GET'])
def api_round(round_number):
    event = load_event()
    if round_number not in event['rounds']:
        return jsonify({'error': f'Round {round_number} has not been generated'}), 404
    return jsonify({'courts': [c.to_dict() for c in get_round_courts(event, round_number)]})


def _parse_score(value):
    if value is None or value == '':
        return None
    score = int(value)
    if score < 0:
        raise ValueError('Scores cannot be negative')
    return score


@app.route('/api/scores', methods=['POST'])
def api_save_score():
    """Save (or clear) one game score and return the recomputed rankings."""
    data = request.get_json() or {}
    try:
        round_number = int(data.get('round'))
        court_number = int(data.get('court'))
        game_index = int(data.get('game'))
        team1_score = _parse_score(data.get('team1_score'))
        team2_score = _parse_score(data.get('team2_score'))
    except (TypeError, ValueError) as e:
        return jsonify({'error': f'Invalid score submission: {e}'}), 400

    if (team1_score is None) != (team2_score is None):
        return jsonify({'error': 'Both scores must be filled or both must be empty'}), 400

    with _data_lock:
        settings = load_settings()
        policy = EditPolicy.from_settings(settings)
        if not policy.can_edit(round_number):
            app.logger.warning(f'Rejected score edit for locked round {round_number}')
            return jsonify({'error': f'Round {round_number} is locked'}), 403

        event = load_event()
        courts = get_round_courts(event, round_number)
        court = next((c for c in courts if c.court_number == court_number), None)
        if court is None or not 0 <= game_index < len(court.games):
            return jsonify({'error': 'Game not found'}), 404

        court.games[game_index] = court.games[game_index].with_scores(team1_score, team2_score)
        event['rounds'][round_number]['courts'] = [c.to_dict() for c in courts]
        save_event(event)

    records = calculate_player_rankings(courts, round_number, settings['event_format'])
    return jsonify({
        'success': True,
        'cleared': team1_score is None,
        'rankings': rankings_payload(records, round_number, settings),
    })


@app.route('/api/rounds/<int:round_number>/rankings', methods=['GET'])
def api_rankings(round_number):
    settings = load_settings()
    records = rank_round(load_event(), round_number, settings)
    return jsonify({'rankings': rankings_payload(records, round_number, settings)})


@app.route('/api/points', methods=['GET'])
def api_points():
    rank = request.args.get('rank', type=int)
    curve = request.args.get('curve')
    settings = load_settings()
    if curve:
        if curve not in POINT_CURVES:
            return jsonify({'error': f'Unknown points curve: {curve}'}), 400
        settings['points_curve'] = curve
    return jsonify({'rank': rank, 'points': points_for(settings, rank) if rank is not None else 0})


@app.route('/api/event/finalize', methods=['POST'])
def api_finalize_event():
    """Store final standings from the last round and add the week to the season."""
    with _data_lock:
        settings = load_settings()
        event = load_event()
        last_round = final_round(settings['event_format'])
        records = rank_round(event, last_round, settings)
        if not records:
            return jsonify({'error': f'Round {last_round} has not been generated'}), 400

        ordered = sorted(records, key=lambda r: r.round_place)
        event['final_standings'] = [{
            'player_id': r.id,
            'rank': r.round_place,
            'points': points_for(settings, r.round_place),
        } for r in ordered]
        save_event(event)

        matches = []
        for round_number in sorted(event['rounds']):
            for court in get_round_courts(event, round_number):
                for game in court.games:
                    if game.is_complete:
                        matches.append({
                            'team1': list(game.team1),
                            'team2': list(game.team2),
                            'score1': game.team1_score,
                            'score2': game.team2_score,
                        })
        season = load_season()
        season['weeks'].append({
            'date': datetime.now().date().isoformat(),
            'is_completed': True,
            'standings': [r.id for r in ordered],
            'matches': matches,
        })
        save_season(season)

    app.logger.info(f'Finalized event with {len(ordered)} players')
    return jsonify({'success': True, 'final_standings': event['final_standings']})


@app.route('/api/standings', methods=['GET'])
def api_season_standings():
    settings = load_settings()
    return jsonify({'standings': season_stats(load_season(), settings.get('court_points'))})


@app.route('/api/reset', methods=['POST'])
def api_reset():
    """Clear the current event. Roster, settings and season are kept."""
    with _data_lock:
        save_event({'rounds': {}, 'final_standings': []})
    app.logger.info('Event reset')
    return jsonify({'success': True})


if __name__ == '__main__':
    app.run(debug=True, port=5000)
