from __future__ import annotations

import pytest

from client import load_credentials


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("FOLLOWED_GUILD_ID", "42")
    monkeypatch.setenv("STRATZ_JWT", "jwt")
    monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.com/api/webhooks/1/token")
    return monkeypatch


def test_load_credentials(env: pytest.MonkeyPatch) -> None:
    credentials = load_credentials()
    assert credentials.guild_id == 42
    assert credentials.stratz_jwt == "jwt"
    assert credentials.discord_webhook_url.endswith("/token")


@pytest.mark.parametrize("name", ["FOLLOWED_GUILD_ID", "STRATZ_JWT", "DISCORD_WEBHOOK_URL"])
def test_load_credentials_fails_fast_on_missing_value(env: pytest.MonkeyPatch, name: str) -> None:
    env.setenv(name, "")
    with pytest.raises(RuntimeError, match=name):
        load_credentials()


def test_load_credentials_rejects_non_integer_guild_id(env: pytest.MonkeyPatch) -> None:
    env.setenv("FOLLOWED_GUILD_ID", "team-secret")
    with pytest.raises(RuntimeError, match="integer"):
        load_credentials()
