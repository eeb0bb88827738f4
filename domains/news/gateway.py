"""Discord channel access used by the news relay job.

Connection lifecycle belongs to discord.py; this module only reads recent
history from, and sends to, an already-connected bot's channel.
"""

import asyncio

import aiohttp
import discord

from utils import sanitize_for_log
from .config import HISTORY_LIMIT
from .errors import HistoryQueryError, PostError

# Failures the gateway can surface for a single request
GATEWAY_ERRORS = (discord.DiscordException, aiohttp.ClientError, asyncio.TimeoutError)


async def resolve_channel(bot, channel_id: int):
    """Find the target guild channel, hitting the API if it is not cached.

    Raises:
        HistoryQueryError: If the channel cannot be fetched or is not a guild channel
    """
    channel = bot.get_channel(channel_id)
    if channel is None:
        try:
            channel = await bot.fetch_channel(channel_id)
        except GATEWAY_ERRORS as e:
            raise HistoryQueryError(f"could not fetch channel {channel_id}: {sanitize_for_log(e)}") from e

    if getattr(channel, "guild", None) is None:
        raise HistoryQueryError(f"channel {channel_id} is not a guild channel")

    return channel


async def fetch_recent_messages(channel, limit: int = HISTORY_LIMIT) -> list[str]:
    """Return the content of the newest `limit` messages, newest first."""
    try:
        return [message.content async for message in channel.history(limit=limit)]
    except GATEWAY_ERRORS as e:
        raise HistoryQueryError(
            f"could not read history of channel {channel.id}: {sanitize_for_log(e)}"
        ) from e


async def send_message(channel, text: str) -> None:
    """Send `text` verbatim to the channel."""
    try:
        await channel.send(text)
    except GATEWAY_ERRORS as e:
        raise PostError(f"could not post to channel {channel.id}: {sanitize_for_log(e)}") from e
