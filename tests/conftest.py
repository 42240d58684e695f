"""
Shared pytest fixtures for league night tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os
import yaml

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from league.models import Court


def score_court(court, scores):
    """Return a copy of court with its generated games scored in order.

    scores is a list of (team1_score, team2_score) tuples; None leaves a game
    unscored.
    """
    from league.schedule import generate_games

    games = generate_games(court)
    scored = []
    for game, score in zip(games, scores):
        if score is None:
            scored.append(game)
        else:
            scored.append(game.with_scores(*score))
    scored.extend(games[len(scored):])
    return court.with_games(scored)


@pytest.fixture
def roster_ids():
    """Ten player ids in seed order."""
    return [f"p{i}" for i in range(1, 11)]


@pytest.fixture
def four_player_court():
    return Court(court_number=1, round_number=1, player_ids=["a", "b", "c", "d"])


@pytest.fixture
def five_player_court():
    return Court(court_number=1, round_number=1, player_ids=["a", "b", "c", "d", "e"])


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Flask test client bound to a temporary data directory."""
    import app as app_module
    from filelock import FileLock

    monkeypatch.setattr(app_module, 'DATA_DIR', str(tmp_path))
    monkeypatch.setattr(app_module, 'SETTINGS_FILE', str(tmp_path / 'settings.yaml'))
    monkeypatch.setattr(app_module, 'PLAYERS_FILE', str(tmp_path / 'players.yaml'))
    monkeypatch.setattr(app_module, 'EVENT_FILE', str(tmp_path / 'event.yaml'))
    monkeypatch.setattr(app_module, 'SEASON_FILE', str(tmp_path / 'season.yaml'))
    monkeypatch.setattr(app_module, '_data_lock', FileLock(str(tmp_path / '.lock'), timeout=10))

    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client


@pytest.fixture
def write_settings(tmp_path):
    """Write settings.yaml into the client's data directory."""
    def _write(settings):
        (tmp_path / 'settings.yaml').write_text(yaml.dump(settings, default_flow_style=False))
    return _write
