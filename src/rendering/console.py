"""Console views for standings, schedule and playoffs.

Every renderer takes the data it shows plus the ``Console`` to write to, so
callers (and tests) decide where output goes.
"""

from typing import Mapping, Sequence, Union

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.models.game import Game
from src.models.standings import BracketProjection, ScheduleWeek, TeamRecord
from src.models.team import TeamId
from src.standings.schedule import team_label


def format_points(value: Union[int, float, None]) -> str:
    """Prints whole numbers without a trailing ``.0``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_standings(records: Sequence[TeamRecord], console: Console) -> None:
    table = Table(title="Standings", title_justify="left")
    table.add_column("Team", style="bold")
    for column in ("W", "L", "PF", "PA", "Diff"):
        table.add_column(column, justify="right")

    for record in records:
        table.add_row(
            Text(record.name),
            str(record.wins),
            str(record.losses),
            format_points(record.points_for),
            format_points(record.points_against),
            format_points(record.diff),
        )
    console.print(table)


def game_line(game: Game, names_by_id: Mapping[TeamId, str]) -> str:
    """One schedule line: the score when played, the fixture otherwise."""
    away = team_label(game.away_team_id, names_by_id)
    home = team_label(game.home_team_id, names_by_id)
    if game.is_played:
        return (
            f"{away} {format_points(game.away_score)} - "
            f"{home} {format_points(game.home_score)}"
        )
    return f"{away} @ {home}"


def render_schedule(
    weeks: Sequence[ScheduleWeek], names_by_id: Mapping[TeamId, str], console: Console
) -> None:
    console.rule("Schedule", align="left")
    for week in weeks:
        console.print()
        console.print(
            f"[bold underline]Week {week.week_number} - {escape(week.date or 'TBD')}[/]"
        )
        if week.site:
            console.print(f"[bold]{escape(week.site)}[/]")

        for game in week.games:
            line = Text()
            if game.time:
                line.append(f"{game.time}  ", style="dim")
            line.append(game_line(game, names_by_id))
            if not game.is_played:
                line.append("  Not played yet", style="italic yellow")
            console.print(line)


def render_playoffs(
    projection: BracketProjection, console: Console, dates_label: str = ""
) -> None:
    console.rule("Playoffs", align="left")
    if dates_label:
        console.print(Text(dates_label, style="dim"))

    if not projection.ready:
        console.print(Panel(Text(projection.message or "", style="italic")))
        return

    seeding = "\n".join(f"#{seed.seed} {seed.name}" for seed in projection.seeds)
    console.print(
        Panel(Text(seeding), title="Seeding (based on current standings)", title_align="left")
    )

    rounds = [
        ("Play-in", projection.play_in),
        ("Semifinals", projection.semifinals),
        ("Championship", [projection.championship] if projection.championship else []),
    ]
    for title, matchups in rounds:
        body = "\n".join(matchup.description for matchup in matchups)
        console.print(Panel(Text(body), title=title, title_align="left"))


def render_error(message: str, console: Console) -> None:
    """Shows a failure banner at the top of the output."""
    console.print(
        Panel(Text(message, style="bold"), title="Error", border_style="red", style="red")
    )
