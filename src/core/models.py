"""Core domain models.

The raw models mirror the STRATZ response with every field optional, since
the feed may omit anything. The validated models are what the rest of the
core works with once required fields are guaranteed present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Sequence


class _FallbackEnum(str, Enum):
    """String enum that maps any unrecognized value to UNKNOWN."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        return cls.UNKNOWN  # type: ignore[attr-defined]


class Outcome(Enum):
    """Four-way result of a match, as seen from the tracked guild."""

    CANCELLED = "cancelled"
    VICTORY = "victory"
    DEFEAT = "defeat"
    SPLIT = "split"


class LobbyType(_FallbackEnum):
    UNRANKED = "UNRANKED"
    PRACTICE = "PRACTICE"
    TOURNAMENT = "TOURNAMENT"
    TUTORIAL = "TUTORIAL"
    COOP_VS_BOTS = "COOP_VS_BOTS"
    TEAM_MATCH = "TEAM_MATCH"
    SOLO_QUEUE = "SOLO_QUEUE"
    RANKED = "RANKED"
    SOLO_MID = "SOLO_MID"
    BATTLE_CUP = "BATTLE_CUP"
    EVENT = "EVENT"
    UNKNOWN = "UNKNOWN"


class GameMode(_FallbackEnum):
    NONE = "NONE"
    ALL_PICK = "ALL_PICK"
    CAPTAINS_MODE = "CAPTAINS_MODE"
    RANDOM_DRAFT = "RANDOM_DRAFT"
    SINGLE_DRAFT = "SINGLE_DRAFT"
    ALL_RANDOM = "ALL_RANDOM"
    INTRO = "INTRO"
    THE_DIRETIDE = "THE_DIRETIDE"
    REVERSE_CAPTAINS_MODE = "REVERSE_CAPTAINS_MODE"
    THE_GREEVILING = "THE_GREEVILING"
    TUTORIAL = "TUTORIAL"
    MID_ONLY = "MID_ONLY"
    LEAST_PLAYED = "LEAST_PLAYED"
    NEW_PLAYER_POOL = "NEW_PLAYER_POOL"
    COMPENDIUM_MATCHMAKING = "COMPENDIUM_MATCHMAKING"
    CUSTOM = "CUSTOM"
    CAPTAINS_DRAFT = "CAPTAINS_DRAFT"
    BALANCED_DRAFT = "BALANCED_DRAFT"
    ABILITY_DRAFT = "ABILITY_DRAFT"
    EVENT = "EVENT"
    ALL_RANDOM_DEATH_MATCH = "ALL_RANDOM_DEATH_MATCH"
    SOLO_MID = "SOLO_MID"
    ALL_PICK_RANKED = "ALL_PICK_RANKED"
    TURBO = "TURBO"
    MUTATION = "MUTATION"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Hero:
    id: Optional[int] = None


@dataclass(frozen=True)
class SteamAccount:
    name: Optional[str] = None


@dataclass(frozen=True)
class Player:
    """One participant as delivered by the feed."""

    is_radiant: Optional[bool] = None
    is_victory: Optional[bool] = None
    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None
    imp: Optional[int] = None
    hero: Optional[Hero] = None
    steam_account: Optional[SteamAccount] = None


@dataclass(frozen=True)
class Match:
    """One match as delivered by the feed."""

    id: Optional[int] = None
    lobby_type: Optional[LobbyType] = None
    game_mode: Optional[GameMode] = None
    duration_seconds: Optional[int] = None
    end_date_time: Optional[int] = None
    players: Optional[Sequence[Optional[Player]]] = None


@dataclass(frozen=True)
class Guild:
    id: Optional[int] = None
    name: Optional[str] = None
    logo: Optional[str] = None
    matches: Optional[Sequence[Optional[Match]]] = None


@dataclass(frozen=True)
class ResponseData:
    guild: Optional[Guild] = None


@dataclass(frozen=True)
class StratzResponse:
    """Top-level GraphQL envelope: data, errors, or both."""

    data: Optional[ResponseData] = None
    errors: Optional[List[Any]] = None


@dataclass(frozen=True)
class GuildInfo:
    """Validated identity of the tracked guild."""

    id: int
    name: str
    logo: str


@dataclass(frozen=True)
class PlayerLine:
    """Validated player; imp is the only field allowed to be absent."""

    is_radiant: bool
    is_victory: bool
    kills: int
    deaths: int
    assists: int
    name: str
    hero_id: int
    imp: Optional[int] = None


@dataclass(frozen=True)
class MatchSummary:
    """Validated match with every required field present."""

    id: int
    lobby_type: LobbyType
    game_mode: GameMode
    duration_seconds: int
    end_time: datetime
    players: List[PlayerLine] = field(default_factory=list)


@dataclass(frozen=True)
class Announcement:
    """Everything a notifier needs to describe one new match."""

    guild: GuildInfo
    match: MatchSummary
    outcome: Outcome
    radiant: List[PlayerLine]
    dire: List[PlayerLine]
