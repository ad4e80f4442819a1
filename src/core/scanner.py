"""Core match scan pipeline.

This module is integration-agnostic. It only relies on ports for the match
feed and notifications, enabling other feeds or delivery channels without
changes here.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from core.config import ScanConfig
from core.dedup import ScanCursor
from core.models import Announcement, GuildInfo, MatchSummary
from core.outcome import classify_outcome, split_sides
from core.ports import MatchFeedPort, NotifierPort
from core.validation import validate_envelope, validate_match

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanReport:
    """Counters for one completed scan cycle."""

    fetched: int
    announced: int
    skipped: int


class MatchScanner:
    """Orchestrates fetch, validation, dedup, classification, and notifications."""

    def __init__(
        self,
        feed: MatchFeedPort,
        notifier: NotifierPort,
        config: ScanConfig,
    ) -> None:
        self._feed = feed
        self._notifier = notifier
        self._config = config

    async def scan(self, cursor: ScanCursor) -> ScanReport:
        """Run one scan cycle, announcing every match newer than the cursor.

        Any error propagates and aborts the rest of the cycle. Notifications
        already sent earlier in the cycle stay sent.
        """

        LOGGER.debug("Fetching %s matches of guild %s", self._config.take, self._config.guild_id)
        response = await self._feed.fetch_matches(self._config.guild_id, self._config.take)
        guild, matches = validate_envelope(response)

        announced = 0
        skipped = 0
        # The feed returns newest first; walking it backwards announces in
        # chronological order and moves the cursor one match at a time.
        for raw_match in reversed(matches):
            match = validate_match(raw_match)
            if await self._handle(cursor, guild, match):
                announced += 1
            else:
                skipped += 1

        return ScanReport(fetched=len(matches), announced=announced, skipped=skipped)

    async def _handle(self, cursor: ScanCursor, guild: GuildInfo, match: MatchSummary) -> bool:
        if not cursor.is_new(match.id):
            LOGGER.debug("Skipping match %s, already announced", match.id)
            return False

        # The cursor moves before dispatch: a failed send is dropped, never repeated.
        cursor.advance(match.id)

        if len(match.players) < self._config.min_players:
            LOGGER.debug(
                "Skipping match %s, only %s tracked player(s)",
                match.id,
                len(match.players),
            )
            return False

        radiant, dire = split_sides(match.players)
        announcement = Announcement(
            guild=guild,
            match=match,
            outcome=classify_outcome(match.players),
            radiant=radiant,
            dire=dire,
        )
        await self._notifier.send(announcement)
        LOGGER.info("Announced match %s (%s)", match.id, announcement.outcome.value)
        return True
