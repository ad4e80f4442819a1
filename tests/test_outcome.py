from __future__ import annotations

from core.models import Outcome, PlayerLine
from core.outcome import classify_outcome, split_sides


def _player(name: str, *, is_radiant: bool = True, is_victory: bool = True) -> PlayerLine:
    return PlayerLine(
        is_radiant=is_radiant,
        is_victory=is_victory,
        kills=1,
        deaths=2,
        assists=3,
        name=name,
        hero_id=1,
    )


def test_classify_outcome_four_cases() -> None:
    assert classify_outcome([_player("a", is_victory=True)]) is Outcome.VICTORY
    assert classify_outcome([_player("a", is_victory=False)]) is Outcome.DEFEAT
    assert classify_outcome([]) is Outcome.CANCELLED
    mixed = [_player("a", is_victory=True), _player("b", is_victory=False)]
    assert classify_outcome(mixed) is Outcome.SPLIT


def test_classify_outcome_split_regardless_of_order() -> None:
    players = [
        _player("a", is_victory=False),
        _player("b", is_victory=False),
        _player("c", is_victory=True),
    ]
    assert classify_outcome(players) is Outcome.SPLIT


def test_split_sides_preserves_order() -> None:
    first = _player("first", is_radiant=True)
    second = _player("second", is_radiant=False)
    third = _player("third", is_radiant=True)

    radiant, dire = split_sides([first, second, third])

    assert radiant == [first, third]
    assert dire == [second]


def test_split_sides_ignores_victory_flags() -> None:
    winner = _player("winner", is_radiant=False, is_victory=True)
    loser = _player("loser", is_radiant=False, is_victory=False)

    radiant, dire = split_sides([winner, loser])

    assert radiant == []
    assert dire == [winner, loser]
