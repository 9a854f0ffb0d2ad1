import asyncio
from typing import Any, List, Type, TypeVar, Union

from loguru import logger
from pydantic import BaseModel, ValidationError

from src.models.data_models import LeagueData
from src.models.game import Game
from src.models.team import Team
from .base_source import BaseSource
from .file_source import FileSource
from .http_source import HttpSource

RecordModel = TypeVar("RecordModel", bound=BaseModel)


def source_for(location: str) -> BaseSource:
    """Picks an HTTP source for http(s) URLs and a file source otherwise."""
    if location.lower().startswith(("http://", "https://")):
        return HttpSource(location)
    return FileSource(location)


def parse_records(
    raw_records: List[Any], model: Type[RecordModel], location: str
) -> List[RecordModel]:
    """Validates each raw record, skipping the ones that do not fit ``model``."""
    parsed: List[RecordModel] = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            logger.warning(
                f"Skipping non-object item #{index} in {location}: {type(raw).__name__}"
            )
            continue
        try:
            parsed.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed {model.__name__.lower()} #{index} in {location}: "
                f"{e.error_count()} validation error(s)"
            )
            logger.debug(f"Validation details for {location} #{index}: {e}")
    return parsed


async def load_league_data(
    teams_source: Union[str, BaseSource], games_source: Union[str, BaseSource]
) -> LeagueData:
    """Fetches the teams and games documents concurrently and parses them.

    Raises:
        DataSourceError: Either document could not be read or is not a JSON array.
    """
    sources: List[BaseSource] = [
        source if isinstance(source, BaseSource) else source_for(source)
        for source in (teams_source, games_source)
    ]
    teams_src, games_src = sources

    logger.info(f"Loading league data from {teams_src.label} and {games_src.label}")
    try:
        results = await asyncio.gather(
            teams_src.fetch_records(), games_src.fetch_records(), return_exceptions=True
        )
    finally:
        for source in sources:
            await source.close()

    for source, result in zip(sources, results):
        if isinstance(result, Exception):
            logger.error(f"Error fetching {source.label}: {result}")
            raise result
    raw_teams, raw_games = results

    league = LeagueData(
        teams=parse_records(raw_teams, Team, teams_src.location),
        games=parse_records(raw_games, Game, games_src.location),
    )
    logger.success(
        f"Loaded {len(league.teams)} teams and {len(league.games)} games"
    )
    return league
