"""
Week, season and all-time standings.

Weeks and seasons are plain dicts as stored by the event layer:

    week = {'is_completed': True,
            'standings': ['p3', 'p1', ...],          # final order, 1..N
            'matches': [{'team1': [...], 'team2': [...], 'score1': 11, 'score2': 7}]}
    season = {'weeks': [week, ...],
              'standings': [{'player_id': 'p1', 'points': 2400}, ...]}  # optional
"""
import math
from typing import Dict, List, Optional

from league.points import RANKS_PER_COURT, court_points_for_rank


def _empty_stats(player_id: str) -> Dict:
    return {
        'id': player_id,
        'points': 0,
        'wins': 0,
        'losses': 0,
        'points_won': 0,
        'points_lost': 0,
        'diff': 0,
        'appearances': 0,
        'champ_court': 0,
        'weekly_ranks': [],
    }


def aggregate_week(week: Dict) -> Dict[str, Dict]:
    """Per-player match totals for a week. A tied match is a loss for both teams."""
    stats: Dict[str, Dict] = {}
    for match in week.get('matches') or []:
        score1 = match.get('score1')
        score2 = match.get('score2')
        if score1 is None or score2 is None:
            continue
        sides = (
            (match.get('team1', []), score1, score2),
            (match.get('team2', []), score2, score1),
        )
        for team, score, opponent_score in sides:
            for player_id in team:
                entry = stats.setdefault(player_id, _empty_stats(player_id))
                entry['appearances'] += 1
                entry['points_won'] += score
                entry['points_lost'] += opponent_score
                entry['diff'] += score - opponent_score
                if score > opponent_score:
                    entry['wins'] += 1
                else:
                    entry['losses'] += 1
    return stats


def week_final_positions(week: Dict, table=None) -> Optional[List[Dict]]:
    """
    Final court, position and points for each player of a completed week.

    Returns None unless the week is completed and carries its final
    standings (player ids in rank order).
    """
    standings = week.get('standings')
    if not week.get('is_completed') or not isinstance(standings, list) or not standings:
        return None

    results = []
    for index, player_id in enumerate(standings):
        rank = index + 1
        results.append({
            'player_id': player_id,
            'court': math.ceil(rank / RANKS_PER_COURT),
            'position': (rank - 1) % RANKS_PER_COURT + 1,
            'rank': rank,
            'points_earned': court_points_for_rank(rank, table),
        })
    return results


def season_stats(season: Dict, table=None) -> List[Dict]:
    """
    Season totals from each completed week's final positions.

    Points only come from final positions; match wins and differentials are
    folded in from the week's matches for the tiebreak.
    """
    cumulative: Dict[str, Dict] = {}
    for week in season.get('weeks') or []:
        positions = week_final_positions(week, table)
        if positions is None:
            continue

        match_stats = aggregate_week(week)
        for position in positions:
            player_id = position['player_id']
            entry = cumulative.setdefault(player_id, _empty_stats(player_id))
            entry['points'] += position['points_earned']
            entry['appearances'] += 1
            entry['weekly_ranks'].append(position['rank'])
            if position['rank'] <= RANKS_PER_COURT:
                entry['champ_court'] += 1

            played = match_stats.get(player_id)
            if played:
                for key in ('wins', 'losses', 'points_won', 'points_lost', 'diff'):
                    entry[key] += played[key]

    return sorted(cumulative.values(), key=lambda s: (-s['points'], -s['wins'], -s['diff']))


def all_time_stats(current_season: Dict, past_seasons: List[Dict], table=None) -> List[Dict]:
    """Sum season points across seasons. Stored season standings win over derived ones."""
    totals: Dict[str, Dict] = {}

    def add(player_id, points):
        entry = totals.setdefault(player_id, {'player_id': player_id, 'points': 0, 'seasons': 0})
        entry['points'] += points
        entry['seasons'] += 1

    for stats in season_stats(current_season, table):
        add(stats['id'], stats['points'])

    for season in past_seasons:
        stored = season.get('standings')
        if stored:
            for row in stored:
                add(row['player_id'], row.get('points', 0))
        else:
            for stats in season_stats(season, table):
                add(stats['id'], stats['points'])

    ranked = sorted(totals.values(), key=lambda t: -t['points'])
    for index, entry in enumerate(ranked):
        entry['rank'] = index + 1
    return ranked
