"""Discord webhook notification adapter.

Formats an announcement as a webhook embed and posts it, once, with no retry.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from adapters.notification_formatting import build_webhook_payload
from core.errors import DispatchError
from core.models import Announcement


class DiscordWebhookNotifier:
    """Notifier adapter that posts announcements to a Discord webhook."""

    def __init__(
        self,
        webhook_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._webhook_url = webhook_url
        self._http_client = http_client
        self._timeout = timeout

    async def _post(self, client: httpx.AsyncClient, payload: Dict[str, Any]) -> None:
        try:
            response = await client.post(self._webhook_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text[:200]
            raise DispatchError(f"Discord webhook error {e.response.status_code}: {body}") from e
        except httpx.HTTPError as e:
            raise DispatchError(f"Discord webhook request failed: {e.__class__.__name__}") from e

    async def send(self, announcement: Announcement) -> None:
        """Send the formatted announcement to the webhook."""

        payload = build_webhook_payload(announcement)
        if self._http_client is not None:
            await self._post(self._http_client, payload)
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            await self._post(client, payload)
