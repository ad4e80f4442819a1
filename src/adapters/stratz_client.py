"""STRATZ GraphQL match feed adapter.

Implements the core MatchFeedPort by posting one GraphQL query per scan.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from adapters.stratz_mapper import parse_response
from core.errors import FetchDecodeError, FetchRequestError
from core.models import StratzResponse

LOGGER = logging.getLogger(__name__)

API_URL = "https://api.stratz.com/graphql"

LATEST_GUILD_MATCHES_QUERY = """
query MatchesQuery($guildId: Int!, $take: Int!) {
  guild(id: $guildId) {
    id
    name
    logo
    matches(take: $take) {
      id
      lobbyType
      gameMode
      durationSeconds
      endDateTime
      players {
        isRadiant
        isVictory
        kills
        deaths
        assists
        imp
        hero {
          id
        }
        steamAccount {
          name
        }
      }
    }
  }
}
"""


def build_query(guild_id: int, take: int) -> Dict[str, Any]:
    """Return the GraphQL request body for the latest `take` guild matches."""

    return {
        "operationName": "MatchesQuery",
        "query": LATEST_GUILD_MATCHES_QUERY,
        "variables": {"guildId": guild_id, "take": take},
    }


class StratzClient:
    """Match feed adapter that queries the STRATZ GraphQL API."""

    def __init__(
        self,
        jwt: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> None:
        self._jwt = jwt
        self._http_client = http_client
        self._timeout = timeout

    async def _post(self, client: httpx.AsyncClient, body: Dict[str, Any]) -> httpx.Response:
        try:
            # STRATZ accepts the API token as a query parameter.
            response = await client.post(API_URL, params={"jwt": self._jwt}, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchRequestError(f"STRATZ returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchRequestError(f"STRATZ request failed: {e.__class__.__name__}") from e
        return response

    async def fetch_matches(self, guild_id: int, take: int) -> StratzResponse:
        """Fetch the latest `take` matches of the guild having `guild_id`."""

        LOGGER.debug("Fetching %s matches of guild %s", take, guild_id)
        body = build_query(guild_id, take)
        if self._http_client is not None:
            response = await self._post(self._http_client, body)
        else:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers={"User-Agent": "STRATZ_API"},
            ) as client:
                response = await self._post(client, body)

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchDecodeError("STRATZ response is not valid JSON") from e
        return parse_response(payload)
