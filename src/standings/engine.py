"""Standings computation.

Folds played games into per-team records and orders them by wins, point
differential, points scored and finally team name. The computation is pure:
inputs are never mutated and every call starts from zeroed records.
"""

from typing import Dict, Iterable, List, Tuple

from src.models.game import Game
from src.models.standings import TeamRecord
from src.models.team import Team, TeamId


def name_sort_key(name: str) -> Tuple[str, str]:
    """Case-insensitive collation with exact text as the final decider."""
    return (name.casefold(), name)


def standings_sort_key(record: TeamRecord) -> tuple:
    return (
        -record.wins,
        -record.diff,
        -record.points_for,
        name_sort_key(record.name),
    )


def apply_game(records: Dict[TeamId, TeamRecord], game: Game) -> bool:
    """Credits one game to ``records``.

    Returns False, leaving every record untouched, when the game is not
    played or references a team that is not in ``records``.
    """
    if not game.is_played:
        return False

    home = records.get(game.home_team_id)
    away = records.get(game.away_team_id)
    if home is None or away is None:
        return False

    home.points_for += game.home_score
    home.points_against += game.away_score
    away.points_for += game.away_score
    away.points_against += game.home_score

    # Equal scores only move points; there is no ties column.
    if game.home_score > game.away_score:
        home.wins += 1
        away.losses += 1
    elif game.away_score > game.home_score:
        away.wins += 1
        home.losses += 1
    return True


def compute_standings(teams: Iterable[Team], games: Iterable[Game]) -> List[TeamRecord]:
    """Returns one record per distinct team id, best team first."""
    records: Dict[TeamId, TeamRecord] = {}
    for team in teams:
        records[team.id] = TeamRecord(team_id=team.id, name=team.name)

    for game in games:
        apply_game(records, game)

    return sorted(records.values(), key=standings_sort_key)
