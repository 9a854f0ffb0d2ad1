from datetime import date as Date
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from src.models.game import Game
from src.models.standings import ScheduleWeek
from src.models.team import TeamId


def schedule_sort_key(game: Game) -> Tuple[int, Date, str, str]:
    """Dated games first in calendar order, undated ones after by raw text."""
    calendar_date = game.calendar_date
    if calendar_date is None:
        return (1, Date.min, game.date or "", game.time or "")
    return (0, calendar_date, "", game.time or "")


def sort_schedule(games: Iterable[Game]) -> List[Game]:
    return sorted(games, key=schedule_sort_key)


def group_schedule(games: Iterable[Game]) -> List[ScheduleWeek]:
    """Sorts ``games`` and groups them by date, numbering weeks from 1.

    Groups appear in the order their date is first seen in the sorted
    schedule.
    """
    weeks: List[ScheduleWeek] = []
    index_by_date: Dict[Optional[str], int] = {}

    for game in sort_schedule(games):
        position = index_by_date.get(game.date)
        if position is None:
            position = len(weeks)
            index_by_date[game.date] = position
            weeks.append(ScheduleWeek(week_number=position + 1, date=game.date))
        weeks[position].games.append(game)

    return weeks


def team_label(team_id: Optional[TeamId], names_by_id: Mapping[TeamId, str]) -> str:
    """Display name of a fixture side: team name, else the raw id, else TBD."""
    name = names_by_id.get(team_id) if team_id is not None else None
    if name:
        return name
    if team_id is not None and team_id != "":
        return str(team_id)
    return "TBD"
