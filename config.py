"""Global configuration for the News Relay bot."""

import os
from dataclasses import dataclass
from pathlib import Path

import httpx
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
CHANNEL_ID = os.getenv("CHANNEL_ID")

# Feed
RSS_URL = os.getenv("RSS_URL")

# Polling (fixed, not read from the environment)
POLL_INTERVAL_SECONDS = 60
FEED_TIMEOUT_SECONDS = 15
TICK_TIMEOUT_SECONDS = 30

# Prefix commands - "hey bot, " must come before "hey bot " so the comma is consumed
COMMAND_PREFIXES = ["~", "hey bot, ", "hey bot "]

# Logging
LOG_DIR = Path(os.getenv("LOCALAPPDATA", ".")) / "news-relay" / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)


class ConfigError(Exception):
    """Required configuration is missing or invalid. Fatal at startup."""


@dataclass(frozen=True)
class RelaySettings:
    """Validated settings bound once at process start."""

    token: str
    channel_id: int
    rss_url: str


def _require(name: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ConfigError(f"missing {name}")
    return value.strip()


def parse_channel_id(raw: str) -> int:
    """Parse a Discord channel ID (snowflake) from its string form."""
    try:
        channel_id = int(raw)
    except ValueError:
        raise ConfigError(f"CHANNEL_ID must be numeric, got {raw!r}") from None
    if channel_id <= 0:
        raise ConfigError(f"CHANNEL_ID must be positive, got {channel_id}")
    return channel_id


def validate_feed_url(raw: str) -> str:
    """Check the feed URL is an absolute http(s) URL."""
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise ConfigError(f"RSS_URL is not a valid URL: {e}") from None
    if not url.is_absolute_url or url.scheme not in ("http", "https") or not url.host:
        raise ConfigError("RSS_URL must be an absolute http(s) URL")
    return raw


def load_settings(
    token: str | None = None,
    channel_id: str | None = None,
    rss_url: str | None = None,
) -> RelaySettings:
    """Validate the environment-derived settings.

    Arguments default to the values read from the environment at import.

    Raises:
        ConfigError: If any required value is missing or malformed
    """
    token = _require("DISCORD_TOKEN", token if token is not None else DISCORD_TOKEN)
    raw_channel = _require("CHANNEL_ID", channel_id if channel_id is not None else CHANNEL_ID)
    raw_url = _require("RSS_URL", rss_url if rss_url is not None else RSS_URL)

    return RelaySettings(
        token=token,
        channel_id=parse_channel_id(raw_channel),
        rss_url=validate_feed_url(raw_url),
    )
