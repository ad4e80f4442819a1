"""Credential loading for guildwatch.

The three values the watcher cannot run without come from the environment,
so secrets stay out of config.json and out of the repo.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Credentials:
    """Required process-level values."""

    guild_id: int
    stratz_jwt: str
    discord_webhook_url: str


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing {name} in environment")
    return value


def load_credentials() -> Credentials:
    """Read FOLLOWED_GUILD_ID, STRATZ_JWT and DISCORD_WEBHOOK_URL.

    We read them via python-dotenv so a local .env file works too. Missing or
    malformed values fail fast at startup rather than on the first scan.
    """

    load_dotenv()

    raw_guild_id = _require_env("FOLLOWED_GUILD_ID")
    try:
        guild_id = int(raw_guild_id)
    except ValueError as e:
        raise RuntimeError(f"FOLLOWED_GUILD_ID must be an integer, got {raw_guild_id!r}") from e

    credentials = Credentials(
        guild_id=guild_id,
        stratz_jwt=_require_env("STRATZ_JWT"),
        discord_webhook_url=_require_env("DISCORD_WEBHOOK_URL"),
    )
    logging.getLogger(__name__).info("Loaded credentials for guild %s", guild_id)
    return credentials
