"""STRATZ-to-core response mapping adapter.

This keeps GraphQL field names and JSON quirks out of the core pipeline.
Absent or null fields become None; presence is checked later by the core
validator. A value of the wrong JSON type means the body isn't a STRATZ
response at all, which is a decode failure.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, TypeVar

from core.errors import FetchDecodeError
from core.models import (
    GameMode,
    Guild,
    Hero,
    LobbyType,
    Match,
    Player,
    ResponseData,
    SteamAccount,
    StratzResponse,
)

T = TypeVar("T")


def _object(value: Any, path: str) -> Optional[dict]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise FetchDecodeError(f"{path}: expected an object, got {type(value).__name__}")
    return value


def _int(value: Any, path: str) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; JSON true is never a count or an id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise FetchDecodeError(f"{path}: expected an integer, got {value!r}")
    return value


def _bool(value: Any, path: str) -> Optional[bool]:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise FetchDecodeError(f"{path}: expected a boolean, got {value!r}")
    return value


def _str(value: Any, path: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FetchDecodeError(f"{path}: expected a string, got {value!r}")
    return value


def _list(
    value: Any,
    path: str,
    item: Callable[[Any, str], Optional[T]],
) -> Optional[List[Optional[T]]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise FetchDecodeError(f"{path}: expected a list, got {type(value).__name__}")
    return [item(entry, f"{path}[{index}]") for index, entry in enumerate(value)]


def _player(value: Any, path: str) -> Optional[Player]:
    raw = _object(value, path)
    if raw is None:
        return None
    hero = _object(raw.get("hero"), f"{path}.hero")
    steam_account = _object(raw.get("steamAccount"), f"{path}.steamAccount")
    return Player(
        is_radiant=_bool(raw.get("isRadiant"), f"{path}.isRadiant"),
        is_victory=_bool(raw.get("isVictory"), f"{path}.isVictory"),
        kills=_int(raw.get("kills"), f"{path}.kills"),
        deaths=_int(raw.get("deaths"), f"{path}.deaths"),
        assists=_int(raw.get("assists"), f"{path}.assists"),
        imp=_int(raw.get("imp"), f"{path}.imp"),
        hero=None if hero is None else Hero(id=_int(hero.get("id"), f"{path}.hero.id")),
        steam_account=(
            None
            if steam_account is None
            else SteamAccount(name=_str(steam_account.get("name"), f"{path}.steamAccount.name"))
        ),
    )


def _match(value: Any, path: str) -> Optional[Match]:
    raw = _object(value, path)
    if raw is None:
        return None
    lobby_type = _str(raw.get("lobbyType"), f"{path}.lobbyType")
    game_mode = _str(raw.get("gameMode"), f"{path}.gameMode")
    return Match(
        id=_int(raw.get("id"), f"{path}.id"),
        # Values added to the schema after this table was written map to UNKNOWN.
        lobby_type=None if lobby_type is None else LobbyType(lobby_type),
        game_mode=None if game_mode is None else GameMode(game_mode),
        duration_seconds=_int(raw.get("durationSeconds"), f"{path}.durationSeconds"),
        end_date_time=_int(raw.get("endDateTime"), f"{path}.endDateTime"),
        players=_list(raw.get("players"), f"{path}.players", _player),
    )


def _guild(value: Any, path: str) -> Optional[Guild]:
    raw = _object(value, path)
    if raw is None:
        return None
    return Guild(
        id=_int(raw.get("id"), f"{path}.id"),
        name=_str(raw.get("name"), f"{path}.name"),
        logo=_str(raw.get("logo"), f"{path}.logo"),
        matches=_list(raw.get("matches"), f"{path}.matches", _match),
    )


def parse_response(payload: Any) -> StratzResponse:
    """Build a core StratzResponse from a decoded GraphQL JSON body."""

    raw = _object(payload, "response")
    if raw is None:
        raise FetchDecodeError("response: empty body")

    errors = raw.get("errors")
    if errors is not None and not isinstance(errors, list):
        raise FetchDecodeError("response.errors: expected a list")

    data = _object(raw.get("data"), "data")
    return StratzResponse(
        data=None if data is None else ResponseData(guild=_guild(data.get("guild"), "data.guild")),
        errors=errors,
    )
