"""Shared pytest fixtures and league builders."""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any

import pytest

from src.models.game import Game
from src.models.team import Team


def make_league(seed: int, team_count: int = 6, game_count: int = 20) -> tuple[list[Team], list[Game]]:
    """Random league with a mix of played, pending, tied and dangling games."""
    rng = random.Random(seed)
    teams = [Team(id=i, name=f"Team {chr(65 + i)}") for i in range(team_count)]
    games: list[Game] = []
    for _ in range(game_count):
        home, away = rng.sample(range(team_count), 2)
        kind = rng.random()
        if kind < 0.15:
            games.append(Game(home_team_id=home, away_team_id=away))
        elif kind < 0.25:
            score = rng.randint(0, 30)
            games.append(
                Game(home_team_id=home, away_team_id=away, home_score=score, away_score=score)
            )
        elif kind < 0.3:
            games.append(
                Game(
                    home_team_id=home,
                    away_team_id=999,
                    home_score=rng.randint(0, 30),
                    away_score=rng.randint(0, 30),
                )
            )
        else:
            games.append(
                Game(
                    home_team_id=home,
                    away_team_id=away,
                    home_score=rng.randint(0, 30),
                    away_score=rng.randint(0, 30),
                )
            )
    return teams, games


@pytest.fixture
def example_teams() -> list[Team]:
    return [Team(id=1, name="A"), Team(id=2, name="B"), Team(id=3, name="C")]


@pytest.fixture
def example_games() -> list[Game]:
    return [
        Game.model_validate({"homeTeamId": 1, "awayTeamId": 2, "homeScore": 10, "awayScore": 7}),
        Game.model_validate({"homeTeamId": 2, "awayTeamId": 3, "homeScore": 5, "awayScore": 5}),
        Game.model_validate({"homeTeamId": 3, "awayTeamId": 1}),
    ]


@pytest.fixture
def six_teams_raw() -> list[dict[str, Any]]:
    return [{"id": f"t{i}", "name": name} for i, name in enumerate(
        ["Hawks", "Bears", "Lions", "Wolves", "Sharks", "Eagles"], start=1
    )]


@pytest.fixture
def games_raw() -> list[dict[str, Any]]:
    return [
        {"homeTeamId": "t1", "awayTeamId": "t2", "homeScore": 21, "awayScore": 14,
         "date": "2026-04-04", "time": "9:00 AM", "location": "North Field"},
        {"homeTeamId": "t3", "awayTeamId": "t4", "homeScore": 7, "awayScore": 10,
         "date": "2026-04-04", "time": "10:30 AM", "location": "North Field"},
        {"homeTeamId": "t5", "awayTeamId": "t6",
         "date": "2026-04-11", "time": "9:00 AM", "location": "South Field"},
        {"homeTeamId": "t6", "awayTeamId": "t1",
         "date": "2026-04-11", "time": "10:30 AM"},
    ]


@pytest.fixture
def league_files(tmp_path: Path, six_teams_raw, games_raw) -> tuple[Path, Path]:
    teams_path = tmp_path / "teams.json"
    games_path = tmp_path / "games.json"
    teams_path.write_text(json.dumps(six_teams_raw), encoding="utf-8")
    games_path.write_text(json.dumps(games_raw), encoding="utf-8")
    return teams_path, games_path


@pytest.fixture
def league_factory():
    return make_league
