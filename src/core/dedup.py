"""Deduplication state (core domain)."""

from __future__ import annotations

from dataclasses import dataclass

# Lower than any id the feed hands out.
NO_MATCH_ID = -1


@dataclass
class ScanCursor:
    """Highest match id already handled during this process lifetime.

    STRATZ match ids grow over time, so a single integer is enough to tell
    new matches from ones we've already seen. The cursor lives in memory
    only; a restart starts again from the sentinel.
    """

    last_match_id: int = NO_MATCH_ID

    def is_new(self, match_id: int) -> bool:
        return match_id > self.last_match_id

    def advance(self, match_id: int) -> None:
        """Move the cursor forward; it never moves back."""

        if match_id > self.last_match_id:
            self.last_match_id = match_id
