"""Required-field validation for feed records (core domain).

Every check raises UpstreamDataError on the first missing field. There is no
per-field skipping: a malformed record aborts the whole scan cycle so a
half-described match is never announced.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple, TypeVar

from core.errors import UpstreamDataError
from core.models import (
    GuildInfo,
    Match,
    MatchSummary,
    Player,
    PlayerLine,
    StratzResponse,
)

T = TypeVar("T")


def require(value: Optional[T], field: str) -> T:
    """Return value, or raise UpstreamDataError naming the missing field."""

    if value is None:
        raise UpstreamDataError(field)
    return value


def validate_envelope(response: StratzResponse) -> Tuple[GuildInfo, Sequence[Optional[Match]]]:
    """Check the response envelope and return the guild and its raw matches."""

    if response.errors:
        raise UpstreamDataError("errors", f"response reported {len(response.errors)} error(s)")

    data = require(response.data, "data")
    guild = require(data.guild, "guild")
    info = GuildInfo(
        id=require(guild.id, "guild.id"),
        name=require(guild.name, "guild.name"),
        logo=require(guild.logo, "guild.logo"),
    )
    matches = require(guild.matches, "guild.matches")
    return info, matches


def validate_player(player: Optional[Player]) -> PlayerLine:
    player = require(player, "player")
    steam_account = require(player.steam_account, "player.steam_account")
    hero = require(player.hero, "player.hero")
    return PlayerLine(
        is_radiant=require(player.is_radiant, "player.is_radiant"),
        is_victory=require(player.is_victory, "player.is_victory"),
        kills=require(player.kills, "player.kills"),
        deaths=require(player.deaths, "player.deaths"),
        assists=require(player.assists, "player.assists"),
        name=require(steam_account.name, "player.steam_account.name"),
        hero_id=require(hero.id, "player.hero.id"),
        imp=player.imp,
    )


def _end_time(timestamp: int) -> datetime:
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise UpstreamDataError("match.end_date_time", f"invalid timestamp {timestamp}") from e


def validate_match(match: Optional[Match]) -> MatchSummary:
    """Return the validated view of a match, players included."""

    match = require(match, "match")
    match_id = require(match.id, "match.id")
    lobby_type = require(match.lobby_type, "match.lobby_type")
    game_mode = require(match.game_mode, "match.game_mode")
    duration = require(match.duration_seconds, "match.duration_seconds")
    if duration < 0:
        raise UpstreamDataError("match.duration_seconds", f"negative duration {duration}")
    end_time = _end_time(require(match.end_date_time, "match.end_date_time"))
    players: List[PlayerLine] = [
        validate_player(player) for player in require(match.players, "match.players")
    ]
    return MatchSummary(
        id=match_id,
        lobby_type=lobby_type,
        game_mode=game_mode,
        duration_seconds=duration,
        end_time=end_time,
        players=players,
    )
