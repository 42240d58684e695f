import argparse
import os
import sys
import yaml
from league.allocation import InvalidPlayerCount
from league.draw import generate_courts
from league.models import Player, seed_order
from league.schedule import generate_games, sit_outs
from league.tiers import generate_tier_courts


def load_players(file_path):
    players = []
    with open(file_path, mode='r', encoding='utf-8') as file:
        data = yaml.safe_load(file) or []
        for entry in data:
            if isinstance(entry, str):
                entry = {'id': entry}
            players.append(Player.from_dict(entry))
    return players


def build_courts(players, round_number=1, preferred_size=5, event_format='challenge'):
    """Seed the roster by rating and place it on courts with their games attached."""
    player_ids = seed_order(players)
    if event_format == 'challenge':
        courts = generate_courts(player_ids, round_number, preferred_size)
    else:
        courts = generate_tier_courts(player_ids, round_number)
    return [court.with_games(generate_games(court)) for court in courts]


def format_courts(courts, names=None):
    names = names or {}
    lines = []
    for court in courts:
        if lines:
            lines.append('')
        header = f"# Court {court.court_number}"
        if court.tier:
            header += f" ({court.tier})"
        lines.append(header)
        resting = sit_outs(court)
        for game, rest in zip(court.games, resting):
            team1 = ' & '.join(names.get(p, p) for p in game.team1)
            team2 = ' & '.join(names.get(p, p) for p in game.team2)
            line = f"{team1} vs {team2}"
            if rest:
                line += f"  (sits: {names.get(rest, rest)})"
            lines.append(line)
    return '\n'.join(lines)


def main():
    script_dir = os.path.dirname(__file__)
    base_dir = os.path.dirname(script_dir)

    parser = argparse.ArgumentParser(description='Print courts and games for a league night round.')
    parser.add_argument('players_file', nargs='?', default=os.path.join(base_dir, 'data', 'players.yaml'))
    parser.add_argument('--round', type=int, default=1, dest='round_number')
    parser.add_argument('--size', type=int, default=5, choices=(4, 5))
    parser.add_argument('--format', default='challenge', choices=('challenge', 'tiered', 'league'))
    args = parser.parse_args()

    players = load_players(args.players_file)
    if not players:
        print(f"No players loaded. Check {args.players_file}", file=sys.stderr)
        return 1

    try:
        courts = build_courts(players, args.round_number, args.size, args.format)
    except (InvalidPlayerCount, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_courts(courts, {p.id: p.name for p in players}))
    return 0


if __name__ == '__main__':
    sys.exit(main())
