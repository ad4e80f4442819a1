"""Shared notification formatting helpers.

Keeping formatting here keeps announcements consistent and lets the core
stay unaware of Discord embeds, emoji and STRATZ links.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from adapters.hero_icons import hero_icon
from core.models import Announcement, GameMode, LobbyType, Outcome, PlayerLine

UNKNOWN_LABEL = "Unknown"
TITLE_SEPARATOR = " · "

MATCH_URL = "https://stratz.com/matches/{match_id}"
GUILD_URL = "https://stratz.com/guilds/{guild_id}"
GUILD_LOGO_URL = "https://steamusercontent-a.akamaihd.net/ugc/{logo}/"

RADIANT_FIELD_NAME = "<:radiant:958274781919207505> Radiant"
DIRE_FIELD_NAME = "<:dire:958274694203719740> Dire"
DURATION_FIELD_NAME = ":clock3: Duration"

OUTCOME_LABELS: Mapping[Outcome, str] = MappingProxyType(
    {
        Outcome.CANCELLED: "Cancelled",
        Outcome.VICTORY: "Victory",
        Outcome.DEFEAT: "Defeat",
        Outcome.SPLIT: "Clash",
    }
)

# Discord blurple, green, red and yellow.
OUTCOME_COLORS: Mapping[Outcome, int] = MappingProxyType(
    {
        Outcome.CANCELLED: 0x5865F2,
        Outcome.VICTORY: 0x57F287,
        Outcome.DEFEAT: 0xED4245,
        Outcome.SPLIT: 0xFEE75C,
    }
)

LOBBY_TYPE_LABELS: Mapping[LobbyType, str] = MappingProxyType(
    {
        LobbyType.UNRANKED: "Unranked",
        LobbyType.PRACTICE: "Lobby",
        LobbyType.TOURNAMENT: "The International",
        LobbyType.TUTORIAL: "Tutorial",
        LobbyType.COOP_VS_BOTS: "Bots",
        LobbyType.TEAM_MATCH: "Guild",
        LobbyType.SOLO_QUEUE: "Solo Ranked",
        LobbyType.RANKED: "Ranked",
        LobbyType.SOLO_MID: "Duel",
        LobbyType.BATTLE_CUP: "Battle Cup",
        LobbyType.EVENT: "Event",
        LobbyType.UNKNOWN: UNKNOWN_LABEL,
    }
)

GAME_MODE_LABELS: Mapping[GameMode, str] = MappingProxyType(
    {
        GameMode.NONE: "None",
        GameMode.ALL_PICK: "All Pick",
        GameMode.CAPTAINS_MODE: "Captains Mode",
        GameMode.RANDOM_DRAFT: "Random Draft",
        GameMode.SINGLE_DRAFT: "Single Draft",
        GameMode.ALL_RANDOM: "All Random",
        GameMode.INTRO: "Intro",
        GameMode.THE_DIRETIDE: "Diretide",
        GameMode.REVERSE_CAPTAINS_MODE: "Reverse Captains Mode",
        GameMode.THE_GREEVILING: "Greeviling",
        GameMode.TUTORIAL: "Tutorial",
        GameMode.MID_ONLY: "Mid Only",
        GameMode.LEAST_PLAYED: "Least Played",
        GameMode.NEW_PLAYER_POOL: "Limited Heroes",
        GameMode.COMPENDIUM_MATCHMAKING: "Compendium",
        GameMode.CUSTOM: "Custom",
        GameMode.CAPTAINS_DRAFT: "Captains Draft",
        GameMode.BALANCED_DRAFT: "Balanced Draft",
        GameMode.ABILITY_DRAFT: "Ability Draft",
        GameMode.EVENT: "Event",
        GameMode.ALL_RANDOM_DEATH_MATCH: "All Random Deathmatch",
        GameMode.SOLO_MID: "Solo Mid",
        GameMode.ALL_PICK_RANKED: "All Draft",
        GameMode.TURBO: "Turbo",
        GameMode.MUTATION: "Mutation",
        GameMode.UNKNOWN: UNKNOWN_LABEL,
    }
)


def format_duration(seconds: int) -> str:
    """Return a duration as minutes:seconds, e.g. 754 -> "12:34"."""

    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def format_title(announcement: Announcement) -> str:
    match = announcement.match
    return TITLE_SEPARATOR.join(
        [
            OUTCOME_LABELS.get(announcement.outcome, UNKNOWN_LABEL),
            LOBBY_TYPE_LABELS.get(match.lobby_type, UNKNOWN_LABEL),
            GAME_MODE_LABELS.get(match.game_mode, UNKNOWN_LABEL),
        ]
    )


def format_player_line(player: PlayerLine) -> str:
    """Render one player as `<hero> <name> [k/d/a]`, plus the IMP if known."""

    line = (
        f"{hero_icon(player.hero_id)} {player.name} "
        f"[{player.kills}/{player.deaths}/{player.assists}]"
    )
    if player.imp is None:
        return line
    return f"{line} `{player.imp:+d}`"


def _players_field(name: str, players: List[PlayerLine]) -> Dict[str, Any]:
    return {
        "name": name,
        "value": "\n".join(format_player_line(player) for player in players),
        "inline": True,
    }


def build_webhook_payload(announcement: Announcement) -> Dict[str, Any]:
    """Return the Discord webhook body announcing one match."""

    guild = announcement.guild
    match = announcement.match

    fields: List[Dict[str, Any]] = []
    if announcement.radiant:
        fields.append(_players_field(RADIANT_FIELD_NAME, announcement.radiant))
    if announcement.dire:
        fields.append(_players_field(DIRE_FIELD_NAME, announcement.dire))
    fields.append(
        {
            "name": DURATION_FIELD_NAME,
            "value": format_duration(match.duration_seconds),
            "inline": False,
        }
    )

    embed = {
        "author": {
            "name": guild.name,
            "url": GUILD_URL.format(guild_id=guild.id),
            "icon_url": GUILD_LOGO_URL.format(logo=guild.logo),
        },
        "title": format_title(announcement),
        "color": OUTCOME_COLORS[announcement.outcome],
        "fields": fields,
        "timestamp": match.end_time.isoformat(),
    }
    return {
        "content": MATCH_URL.format(match_id=match.id),
        "embeds": [embed],
    }
