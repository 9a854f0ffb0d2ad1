# src/models/team.py
from typing import Union

from pydantic import BaseModel, ConfigDict

# Ids are kept exactly as given: 1 and "1" are different teams.
TeamId = Union[int, str]


class Team(BaseModel):
    """A league team as listed in the teams document."""

    model_config = ConfigDict(extra="ignore")

    id: TeamId
    name: str
