"""Playoff seeding and the fixed six-team bracket."""

from typing import List, Sequence

from src.models.enums import BracketRound
from src.models.standings import (
    BracketProjection,
    BracketSlot,
    Matchup,
    Seed,
    TeamRecord,
)

BRACKET_SIZE = 6
NOT_READY_MESSAGE = f"Playoffs will appear once {BRACKET_SIZE} teams are loaded."


def seed_from_standings(records: Sequence[TeamRecord]) -> List[Seed]:
    """Numbers ``records`` 1..N in the order given; callers pass sorted standings."""
    return [
        Seed(seed=index + 1, **record.model_dump(exclude={"diff"}))
        for index, record in enumerate(records)
    ]


def _seeded(seeds: Sequence[Seed], number: int) -> BracketSlot:
    return BracketSlot(seed=seeds[number - 1])


def _winner(matchup: Matchup) -> BracketSlot:
    slots = (matchup.first, matchup.second)
    if all(slot.seed is not None for slot in slots):
        numbers = sorted(slot.seed.seed for slot in slots)
    else:
        numbers = []
    return BracketSlot(winner_of=matchup.label, winner_of_seeds=numbers)


def project_bracket(seeds: Sequence[Seed]) -> BracketProjection:
    """Maps the top six seeds onto the bracket template.

    Play-in winners and semifinal winners are never resolved; the bracket
    only describes who plays whom.
    """
    if len(seeds) < BRACKET_SIZE:
        return BracketProjection(ready=False, message=NOT_READY_MESSAGE, seeds=list(seeds))

    top = list(seeds[:BRACKET_SIZE])

    game_a = Matchup(
        label="Game A",
        round=BracketRound.PLAY_IN,
        first=_seeded(top, 3),
        second=_seeded(top, 6),
    )
    game_b = Matchup(
        label="Game B",
        round=BracketRound.PLAY_IN,
        first=_seeded(top, 4),
        second=_seeded(top, 5),
    )
    semi_1 = Matchup(
        label="Semi 1",
        round=BracketRound.SEMIFINAL,
        first=_winner(game_b),
        second=_seeded(top, 1),
    )
    semi_2 = Matchup(
        label="Semi 2",
        round=BracketRound.SEMIFINAL,
        first=_winner(game_a),
        second=_seeded(top, 2),
    )
    championship = Matchup(
        label="Championship",
        round=BracketRound.CHAMPIONSHIP,
        first=_winner(semi_1),
        second=_winner(semi_2),
    )

    return BracketProjection(
        ready=True,
        seeds=list(seeds),
        play_in=[game_a, game_b],
        semifinals=[semi_1, semi_2],
        championship=championship,
    )
