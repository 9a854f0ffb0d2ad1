from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from .enums import BracketRound
from .game import Game, Score
from .team import TeamId


class TeamRecord(BaseModel):
    """A team's aggregate over its played games."""

    team_id: TeamId
    name: str
    wins: int = 0
    losses: int = 0
    points_for: Score = 0
    points_against: Score = 0

    @computed_field  # type: ignore[misc]
    @property
    def diff(self) -> Score:
        """Point differential (points for minus points against)."""
        return self.points_for - self.points_against


class Seed(TeamRecord):
    """A team record with its 1-based playoff seed."""

    seed: int = Field(..., ge=1)


class BracketSlot(BaseModel):
    """One side of a bracket matchup: a seeded team or the winner of another game."""

    seed: Optional[Seed] = None
    winner_of: Optional[str] = None
    winner_of_seeds: List[int] = Field(default_factory=list)

    @property
    def label(self) -> str:
        if self.seed is not None:
            return f"#{self.seed.seed} {self.seed.name}"
        if self.winner_of_seeds:
            return "Winner of " + "/".join(f"#{n}" for n in self.winner_of_seeds)
        return f"Winner of {self.winner_of}"


class Matchup(BaseModel):
    """A fixed bracket game between two slots."""

    label: str
    round: BracketRound
    first: BracketSlot
    second: BracketSlot

    @property
    def description(self) -> str:
        return f"{self.label}: {self.first.label} vs {self.second.label}"


class BracketProjection(BaseModel):
    """Seed-to-slot mapping of the playoff bracket, or a not-ready placeholder."""

    ready: bool
    message: Optional[str] = None
    seeds: List[Seed] = Field(default_factory=list)
    play_in: List[Matchup] = Field(default_factory=list)
    semifinals: List[Matchup] = Field(default_factory=list)
    championship: Optional[Matchup] = None

    @property
    def matchups(self) -> List[Matchup]:
        games = [*self.play_in, *self.semifinals]
        if self.championship is not None:
            games.append(self.championship)
        return games


class ScheduleWeek(BaseModel):
    """Games sharing a date, numbered in schedule order."""

    week_number: int = Field(..., ge=1)
    date: Optional[str] = None
    games: List[Game] = Field(default_factory=list)

    @property
    def site(self) -> Optional[str]:
        """The single location used by the week's games, if they share one."""
        locations = {game.location for game in self.games if game.location}
        if len(locations) == 1:
            return next(iter(locations))
        return None
