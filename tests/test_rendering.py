"""Tests for the console views."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from src.models.game import Game
from src.models.team import Team
from src.rendering.console import (
    format_points,
    game_line,
    render_error,
    render_playoffs,
    render_schedule,
    render_standings,
)
from src.standings.engine import compute_standings
from src.standings.schedule import group_schedule
from src.standings.seeding import project_bracket, seed_from_standings


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, record=True, color_system=None)


@pytest.fixture
def league(six_teams_raw, games_raw):
    teams = [Team.model_validate(raw) for raw in six_teams_raw]
    games = [Game.model_validate(raw) for raw in games_raw]
    return teams, games


class TestFormatPoints:
    @pytest.mark.parametrize(
        "value, expected",
        [(10, "10"), (10.0, "10"), (2.5, "2.5"), (-3, "-3"), (None, "")],
    )
    def test_values(self, value, expected) -> None:
        assert format_points(value) == expected


class TestGameLine:
    def test_played(self) -> None:
        """Played games show away score then home score."""
        game = Game(home_team_id=1, away_team_id=2, home_score=21.0, away_score=14)
        assert game_line(game, {1: "Hawks", 2: "Bears"}) == "Bears 14 - Hawks 21"

    def test_pending_with_unknown_team(self) -> None:
        """Pending games show the fixture, falling back to ids."""
        game = Game(home_team_id=1, away_team_id="t9")
        assert game_line(game, {1: "Hawks"}) == "t9 @ Hawks"


class TestRenderStandings:
    def test_rows(self, console, league) -> None:
        """Every team appears with its record."""
        render_standings(compute_standings(*league), console)
        output = console.export_text()

        assert "Standings" in output
        for name in ("Hawks", "Bears", "Lions", "Wolves", "Sharks", "Eagles"):
            assert name in output
        assert "Diff" in output


class TestRenderSchedule:
    def test_weeks(self, console, league) -> None:
        """Weeks, shared sites and pending markers are shown."""
        teams, games = league
        names = {t.id: t.name for t in teams}
        render_schedule(group_schedule(games), names, console)
        output = console.export_text()

        assert "Week 1 - 2026-04-04" in output
        assert "Week 2 - 2026-04-11" in output
        assert "North Field" in output
        assert "South Field" in output
        assert "Bears 14 - Hawks 21" in output
        assert "Eagles @ Sharks" in output
        assert "Not played yet" in output


class TestRenderPlayoffs:
    def test_bracket(self, console, league) -> None:
        """A six-team league shows seeding and all matchups."""
        seeds = seed_from_standings(compute_standings(*league))
        render_playoffs(project_bracket(seeds), console, "Friday (Play-in Games)")
        output = console.export_text()

        assert "Friday (Play-in Games)" in output
        assert f"#1 {seeds[0].name}" in output
        assert f"Game A: #3 {seeds[2].name} vs #6 {seeds[5].name}" in output
        assert "Championship: Winner of Semi 1 vs Winner of Semi 2" in output

    def test_placeholder(self, console) -> None:
        """A short league shows the not-ready message."""
        teams = [Team(id=1, name="Solo")]
        seeds = seed_from_standings(compute_standings(teams, []))
        render_playoffs(project_bracket(seeds), console)

        assert "Playoffs will appear once 6 teams are loaded." in console.export_text()


class TestRenderError:
    def test_banner(self, console) -> None:
        render_error("Failed to load games.json: 404", console)
        output = console.export_text()
        assert "Error" in output
        assert "Failed to load games.json: 404" in output
