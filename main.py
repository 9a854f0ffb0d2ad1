import sys
import asyncio
import argparse
from typing import List, Optional

# --- Settings/Logging ---
from src.logging.setup import setup_logging
from src.config.settings import settings

setup_logging()

from loguru import logger

# --- End Settings/Logging ---

from rich.console import Console

from src.sources.base_source import DataSourceError
from src.sources.loader import load_league_data
from src.standings.engine import compute_standings
from src.standings.schedule import group_schedule
from src.standings.seeding import project_bracket, seed_from_standings
from src.rendering.console import (
    render_error,
    render_playoffs,
    render_schedule,
    render_standings,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show league standings, schedule and playoff bracket."
    )
    parser.add_argument(
        "--teams",
        default=settings.teams_source,
        help="Path or URL of the teams JSON document (default: %(default)s).",
    )
    parser.add_argument(
        "--games",
        default=settings.games_source,
        help="Path or URL of the games JSON document (default: %(default)s).",
    )
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point for the application. Returns the process exit code."""
    args = parse_args(argv)
    console = console or Console()

    try:
        league = await load_league_data(args.teams, args.games)
    except DataSourceError as e:
        logger.error(f"Could not load league data: {e}")
        render_error(str(e), console)
        return 1

    standings = compute_standings(league.teams, league.games)
    logger.info(f"Computed standings for {len(standings)} teams.")

    weeks = group_schedule(league.games)
    seeds = seed_from_standings(standings)
    projection = project_bracket(seeds)
    if not projection.ready:
        logger.warning(f"Bracket not ready: only {len(seeds)} seeded teams.")

    render_standings(standings, console)
    render_schedule(weeks, league.names_by_id(), console)
    render_playoffs(projection, console, settings.playoff_dates_label)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
