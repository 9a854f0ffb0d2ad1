from typing import Dict, List

from pydantic import BaseModel, Field

from src.models.game import Game
from src.models.team import Team, TeamId


class LeagueData(BaseModel):
    """The two input documents, parsed, in document order."""

    teams: List[Team] = Field(default_factory=list)
    games: List[Game] = Field(default_factory=list)

    def names_by_id(self) -> Dict[TeamId, str]:
        """Maps team id to display name; later duplicates replace earlier ones."""
        return {team.id: team.name for team in self.teams}
