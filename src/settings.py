"""Static configuration for guildwatch.

Scan timing and logging live in a single JSON file for quick edits without
touching Python. Secrets are read from the environment by client.py.
"""

import json
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# GUILDWATCH_CONFIG overrides the location, e.g. for container deployments.
CONFIG_PATH = os.getenv("GUILDWATCH_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Scan controls:
# - period_seconds: sleep between the end of one scan and the start of the next
# - take: how many of the latest guild matches to request per scan
# - min_players: matches with fewer tracked players are not announced
_scan = _CONFIG.get("scan", {})
SCAN_PERIOD_SECONDS = int(_scan.get("period_seconds", 60 * 30))
SCAN_TAKE = int(_scan.get("take", 10))
MIN_PLAYERS = int(_scan.get("min_players", 1))

# HTTP timeouts for the STRATZ feed and the Discord webhook.
_http = _CONFIG.get("http", {})
STRATZ_TIMEOUT_SECONDS = float(_http.get("stratz_timeout_seconds", 30))
DISCORD_TIMEOUT_SECONDS = float(_http.get("discord_timeout_seconds", 10))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
