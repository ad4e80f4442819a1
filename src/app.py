"""Application entry point for the guildwatch scanner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from dotenv import load_dotenv

import settings
from adapters.discord_notifier import DiscordWebhookNotifier
from adapters.stratz_client import StratzClient
from client import load_credentials
from core.config import ScanConfig
from core.dedup import ScanCursor
from core.scanner import MatchScanner
from scheduler import run_cycle, scan_forever

NAME = "GUILDWATCH"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", False):
        return []
    values = []
    for name in redact_cfg.get("patterns", []):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    load_dotenv()
    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    # httpx logs full request URLs, and the STRATZ one carries the JWT.
    secrets = _collect_redaction_values(config)
    formatter = _RedactingFormatter(secrets, fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/guildwatch.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _build_scanner() -> MatchScanner:
    # Credentials are read once at startup so a bad environment fails immediately.
    credentials = load_credentials()
    feed = StratzClient(credentials.stratz_jwt, timeout=settings.STRATZ_TIMEOUT_SECONDS)
    notifier = DiscordWebhookNotifier(
        credentials.discord_webhook_url,
        timeout=settings.DISCORD_TIMEOUT_SECONDS,
    )
    config = ScanConfig(
        guild_id=credentials.guild_id,
        take=settings.SCAN_TAKE,
        min_players=settings.MIN_PLAYERS,
    )
    return MatchScanner(feed=feed, notifier=notifier, config=config)


def _run() -> None:
    _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    scanner = _build_scanner()
    logger.info(
        "Starting guildwatch, scanning every %s seconds",
        settings.SCAN_PERIOD_SECONDS,
    )
    asyncio.run(scan_forever(scanner, settings.SCAN_PERIOD_SECONDS))


def _run_once() -> int:
    _configure_logging()
    scanner = _build_scanner()
    ok = asyncio.run(run_cycle(scanner, ScanCursor()))
    return 0 if ok else 1


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="guildwatch")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Start the periodic match scanner")
    subparsers.add_parser(
        "once",
        help="Run a single scan cycle and exit; announces every fetched match.",
    )

    args = parser.parse_args(argv)
    if args.command == "once":
        return _run_once()
    _run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
