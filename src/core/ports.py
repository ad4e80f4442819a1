"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for the match feed and notification
adapters so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Protocol

from core.models import Announcement, StratzResponse


class MatchFeedPort(Protocol):
    """Match feed operations required by the core pipeline.

    Implementations raise FetchRequestError or FetchDecodeError on failure.
    """

    async def fetch_matches(self, guild_id: int, take: int) -> StratzResponse:
        ...


class NotifierPort(Protocol):
    """Notification operations required by the core pipeline.

    Implementations raise DispatchError when delivery fails.
    """

    async def send(self, announcement: Announcement) -> None:
        ...
