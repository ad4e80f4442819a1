from __future__ import annotations

import asyncio
from typing import List, Optional

import pytest

from core.config import ScanConfig
from core.dedup import NO_MATCH_ID, ScanCursor
from core.errors import DispatchError, FetchRequestError, UpstreamDataError
from core.models import (
    Announcement,
    GameMode,
    Guild,
    Hero,
    LobbyType,
    Match,
    Outcome,
    Player,
    ResponseData,
    SteamAccount,
    StratzResponse,
)
from core.scanner import MatchScanner


class FakeFeed:
    def __init__(self, response: StratzResponse) -> None:
        self.response = response
        self.calls: list[tuple[int, int]] = []

    async def fetch_matches(self, guild_id: int, take: int) -> StratzResponse:
        self.calls.append((guild_id, take))
        return self.response


class FailingFeed:
    async def fetch_matches(self, guild_id: int, take: int) -> StratzResponse:
        raise FetchRequestError("connection refused")


class FakeNotifier:
    def __init__(self, fail_on: Optional[int] = None) -> None:
        self.sent: list[Announcement] = []
        self._fail_on = fail_on

    async def send(self, announcement: Announcement) -> None:
        if announcement.match.id == self._fail_on:
            raise DispatchError("webhook down")
        self.sent.append(announcement)

    @property
    def sent_ids(self) -> list[int]:
        return [announcement.match.id for announcement in self.sent]


def _player(*, is_radiant: bool = True, is_victory: bool = True) -> Player:
    return Player(
        is_radiant=is_radiant,
        is_victory=is_victory,
        kills=1,
        deaths=1,
        assists=1,
        hero=Hero(id=1),
        steam_account=SteamAccount(name="player"),
    )


def _match(match_id: int, players: Optional[List[Player]] = None, **overrides) -> Match:
    fields = dict(
        id=match_id,
        lobby_type=LobbyType.RANKED,
        game_mode=GameMode.ALL_PICK_RANKED,
        duration_seconds=1800,
        end_date_time=1700000000,
        players=players if players is not None else [_player()],
    )
    fields.update(overrides)
    return Match(**fields)


def _response(matches: list) -> StratzResponse:
    guild = Guild(id=42, name="Team Secret", logo="123456", matches=matches)
    return StratzResponse(data=ResponseData(guild=guild))


def _scanner(feed, notifier, min_players: int = 1) -> MatchScanner:
    return MatchScanner(
        feed=feed,
        notifier=notifier,
        config=ScanConfig(guild_id=42, take=10, min_players=min_players),
    )


def test_announces_oldest_first_and_advances_cursor() -> None:
    feed = FakeFeed(_response([_match(105), _match(103), _match(101)]))
    notifier = FakeNotifier()
    cursor = ScanCursor(last_match_id=100)

    report = asyncio.run(_scanner(feed, notifier).scan(cursor))

    assert notifier.sent_ids == [101, 103, 105]
    assert cursor.last_match_id == 105
    assert report.fetched == 3
    assert report.announced == 3
    assert feed.calls == [(42, 10)]


def test_skips_matches_at_or_below_cursor() -> None:
    feed = FakeFeed(_response([_match(105), _match(103), _match(101)]))
    notifier = FakeNotifier()
    cursor = ScanCursor(last_match_id=103)

    report = asyncio.run(_scanner(feed, notifier).scan(cursor))

    assert notifier.sent_ids == [105]
    assert report.skipped == 2
    assert cursor.last_match_id == 105


def test_second_cycle_with_same_matches_announces_nothing() -> None:
    feed = FakeFeed(_response([_match(2), _match(1)]))
    notifier = FakeNotifier()
    scanner = _scanner(feed, notifier)
    cursor = ScanCursor()

    asyncio.run(scanner.scan(cursor))
    report = asyncio.run(scanner.scan(cursor))

    assert notifier.sent_ids == [1, 2]
    assert report.announced == 0
    assert cursor.last_match_id == 2


def test_cursor_starts_below_any_match_id() -> None:
    assert ScanCursor().last_match_id == NO_MATCH_ID
    assert ScanCursor().is_new(0)


def test_cursor_never_moves_back() -> None:
    cursor = ScanCursor(last_match_id=10)
    cursor.advance(5)
    assert cursor.last_match_id == 10


def test_match_below_min_players_is_skipped_but_recorded() -> None:
    feed = FakeFeed(_response([_match(12), _match(11, players=[])]))
    notifier = FakeNotifier()
    cursor = ScanCursor(last_match_id=10)

    report = asyncio.run(_scanner(feed, notifier).scan(cursor))

    assert notifier.sent_ids == [12]
    assert report.skipped == 1
    assert cursor.last_match_id == 12

    # A later scan that only sees the skipped match doesn't revisit it.
    feed.response = _response([_match(11, players=[])])
    asyncio.run(_scanner(feed, notifier, min_players=0).scan(cursor))
    assert notifier.sent_ids == [12]


def test_min_players_threshold() -> None:
    feed = FakeFeed(_response([_match(3, players=[_player(), _player()]), _match(2)]))
    notifier = FakeNotifier()
    cursor = ScanCursor()

    asyncio.run(_scanner(feed, notifier, min_players=2).scan(cursor))

    assert notifier.sent_ids == [3]
    assert cursor.last_match_id == 3


def test_missing_field_aborts_without_advancing_cursor() -> None:
    feed = FakeFeed(_response([_match(103), _match(102, lobby_type=None), _match(101)]))
    notifier = FakeNotifier()
    cursor = ScanCursor(last_match_id=100)

    with pytest.raises(UpstreamDataError) as exc_info:
        asyncio.run(_scanner(feed, notifier).scan(cursor))

    assert exc_info.value.field == "match.lobby_type"
    assert notifier.sent_ids == [101]
    assert cursor.last_match_id == 101


def test_response_errors_abort_cycle() -> None:
    response = StratzResponse(data=_response([_match(1)]).data, errors=[{"message": "boom"}])
    notifier = FakeNotifier()
    cursor = ScanCursor()

    with pytest.raises(UpstreamDataError):
        asyncio.run(_scanner(FakeFeed(response), notifier).scan(cursor))

    assert notifier.sent == []
    assert cursor.last_match_id == NO_MATCH_ID


def test_fetch_failure_propagates_and_keeps_cursor() -> None:
    cursor = ScanCursor(last_match_id=7)

    with pytest.raises(FetchRequestError):
        asyncio.run(_scanner(FailingFeed(), FakeNotifier()).scan(cursor))

    assert cursor.last_match_id == 7


def test_dispatch_failure_drops_match_and_stops_cycle() -> None:
    feed = FakeFeed(_response([_match(3), _match(2), _match(1)]))
    notifier = FakeNotifier(fail_on=2)
    scanner = _scanner(feed, notifier)
    cursor = ScanCursor()

    with pytest.raises(DispatchError):
        asyncio.run(scanner.scan(cursor))

    # Match 1 stays announced, match 2 is lost, match 3 waits for the next cycle.
    assert notifier.sent_ids == [1]
    assert cursor.last_match_id == 2

    notifier._fail_on = None
    asyncio.run(scanner.scan(cursor))
    assert notifier.sent_ids == [1, 3]


def test_announcement_carries_outcome_and_sides() -> None:
    players = [
        _player(is_radiant=True, is_victory=True),
        _player(is_radiant=False, is_victory=False),
        _player(is_radiant=True, is_victory=True),
    ]
    feed = FakeFeed(_response([_match(1, players=players)]))
    notifier = FakeNotifier()

    asyncio.run(_scanner(feed, notifier).scan(ScanCursor()))

    (announcement,) = notifier.sent
    assert announcement.outcome is Outcome.SPLIT
    assert len(announcement.radiant) == 2
    assert len(announcement.dire) == 1
    assert announcement.guild.name == "Team Secret"
