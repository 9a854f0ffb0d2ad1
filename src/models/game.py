import math
from datetime import date as Date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .team import TeamId

Score = Union[int, float]


class Game(BaseModel):
    """A scheduled or completed fixture between two teams."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    home_team_id: Optional[TeamId] = Field(None, alias="homeTeamId")
    away_team_id: Optional[TeamId] = Field(None, alias="awayTeamId")
    home_score: Optional[Score] = Field(None, alias="homeScore")
    away_score: Optional[Score] = Field(None, alias="awayScore")
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None

    @field_validator("home_score", "away_score", mode="before")
    @classmethod
    def _drop_non_numeric_score(cls, value: Any) -> Optional[Score]:
        # "10", true and friends mean "no score yet", not a coerced number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if isinstance(value, int):
            try:
                float(value)
            except OverflowError:
                # Beyond float range: infinite, so the game stays pending
                return math.copysign(math.inf, value)
        return value

    @field_validator("date", "time", "location", mode="before")
    @classmethod
    def _stringify_metadata(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @computed_field  # type: ignore[misc]
    @property
    def is_played(self) -> bool:
        """True when both scores are present and finite."""
        return (
            self.home_score is not None
            and self.away_score is not None
            and math.isfinite(self.home_score)
            and math.isfinite(self.away_score)
        )

    @property
    def calendar_date(self) -> Optional[Date]:
        """The ISO date of the game, or None when it is missing or unparseable."""
        if not self.date:
            return None
        try:
            return Date.fromisoformat(self.date.strip())
        except ValueError:
            return None
