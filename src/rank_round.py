import argparse
import sys
import yaml
from league.advancement import final_round
from league.models import Court
from league.points import POINT_CURVES
from league.rankings import FORMATS, calculate_player_rankings


def load_round(file_path, round_number):
    """Load one round's courts from an event YAML file."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        data = yaml.safe_load(file) or {}
    rounds = data.get('rounds') or {}
    round_data = rounds.get(round_number) or rounds.get(str(round_number)) or {}
    return [Court.from_dict(c) for c in round_data.get('courts', [])]


def format_rankings(records, round_number, event_format, curve='decay'):
    is_final = round_number >= final_round(event_format)
    points = POINT_CURVES[curve]
    lines = []
    for r in records:
        line = (f"{r.round_place:>3}. {r.id:<16} court {r.court_number}  "
                f"W{r.wins}-L{r.losses}  diff {r.point_differential:+d}  "
                f"rate {r.point_win_rate:.3f}")
        if r.tier:
            line += f"  tier {r.tier} place {r.court_place}"
        if is_final:
            line += f"  points {points(r.round_place)}"
        elif r.next_court:
            line += f"  -> court {r.next_court}"
            if r.next_tier:
                line += f" ({r.next_tier})"
        lines.append(line)
    return '\n'.join(lines)


def main():
    parser = argparse.ArgumentParser(description='Rank a scored league night round.')
    parser.add_argument('event_file')
    parser.add_argument('--round', type=int, default=1, dest='round_number')
    parser.add_argument('--format', default='challenge', choices=FORMATS)
    parser.add_argument('--curve', default='decay', choices=tuple(POINT_CURVES))
    args = parser.parse_args()

    courts = load_round(args.event_file, args.round_number)
    if not courts:
        print(f"No courts for round {args.round_number} in {args.event_file}", file=sys.stderr)
        return 1

    records = calculate_player_rankings(courts, args.round_number, args.format)
    if not records:
        print("Courts do not match the round's draw; nothing to rank.", file=sys.stderr)
        return 1

    print(format_rankings(records, args.round_number, args.format, args.curve))
    return 0


if __name__ == '__main__':
    sys.exit(main())
