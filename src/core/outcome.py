"""Outcome classification and side partitioning (core domain)."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from core.models import Outcome, PlayerLine


def classify_outcome(players: Iterable[PlayerLine]) -> Outcome:
    """Return the match outcome from the players' victory flags.

    Mapping:
    - nobody won or lost (no players): CANCELLED
    - only winners: VICTORY
    - only losers: DEFEAT
    - both winners and losers: SPLIT, i.e. guild members on opposite sides
    """

    any_victory = False
    any_defeat = False
    for player in players:
        if player.is_victory:
            any_victory = True
        else:
            any_defeat = True

    if any_victory and any_defeat:
        return Outcome.SPLIT
    if any_victory:
        return Outcome.VICTORY
    if any_defeat:
        return Outcome.DEFEAT
    return Outcome.CANCELLED


def split_sides(players: Iterable[PlayerLine]) -> Tuple[List[PlayerLine], List[PlayerLine]]:
    """Split players into (radiant, dire), keeping their original order."""

    radiant: List[PlayerLine] = []
    dire: List[PlayerLine] = []
    for player in players:
        if player.is_radiant:
            radiant.append(player)
        else:
            dire.append(player)
    return radiant, dire
