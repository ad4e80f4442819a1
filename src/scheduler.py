"""Fixed-period scheduling loop around the core scan cycle.

Cycles never overlap: the sleep starts only after a cycle has finished,
successfully or not. A failed cycle is logged and the next one runs on
schedule; the period itself is the retry mechanism.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from core.dedup import ScanCursor
from core.errors import ScanError
from core.scanner import MatchScanner

LOGGER = logging.getLogger(__name__)


async def run_cycle(scanner: MatchScanner, cursor: ScanCursor) -> bool:
    """Run one scan cycle and log its outcome. Returns True on success."""

    try:
        report = await scanner.scan(cursor)
    except ScanError as e:
        LOGGER.error("Match scan failed (%s): %s", e.__class__.__name__, e)
        return False
    except Exception:
        LOGGER.exception("Unexpected error in match scan")
        return False

    LOGGER.info(
        "Match scan complete: fetched=%s, announced=%s, skipped=%s, cursor=%s",
        report.fetched,
        report.announced,
        report.skipped,
        cursor.last_match_id,
    )
    return True


async def scan_forever(
    scanner: MatchScanner,
    period_seconds: float,
    cursor: Optional[ScanCursor] = None,
    max_cycles: Optional[int] = None,
) -> ScanCursor:
    """Scan, sleep, repeat. `max_cycles` bounds the loop, None runs forever."""

    cursor = cursor if cursor is not None else ScanCursor()
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        await run_cycle(scanner, cursor)
        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break
        LOGGER.debug("Sleeping %s seconds until the next scan", period_seconds)
        await asyncio.sleep(period_seconds)
    return cursor
