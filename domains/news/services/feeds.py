"""RSS feed fetching and parsing."""

import feedparser
import httpx

from config import FEED_TIMEOUT_SECONDS
from logger import logger
from utils import sanitize_for_log
from ..config import USER_AGENT
from ..errors import FetchError
from ..models import FeedItem


async def fetch_feed_items(
    url: str,
    timeout: float = FEED_TIMEOUT_SECONDS,
    client: httpx.AsyncClient | None = None,
) -> list[FeedItem]:
    """Fetch a feed and parse it into items, newest first.

    Args:
        url: Absolute feed URL
        timeout: HTTP timeout in seconds
        client: Optional shared client; a short-lived one is used otherwise

    Raises:
        FetchError: On network failure, bad status, unparseable body or an
            empty feed
    """
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as client:
            content = await _download(client, url, timeout)
    else:
        content = await _download(client, url, timeout)

    return parse_feed(content, url)


async def _download(client: httpx.AsyncClient, url: str, timeout: float) -> bytes:
    safe_url = sanitize_for_log(url)
    try:
        response = await client.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"feed {safe_url} returned HTTP {e.response.status_code}") from e
    except httpx.TimeoutException as e:
        raise FetchError(f"feed {safe_url} timed out after {timeout}s") from e
    except httpx.RequestError as e:
        raise FetchError(f"could not reach feed {safe_url}: {sanitize_for_log(e)}") from e

    logger.debug(f"Fetched {len(response.content)} bytes from {safe_url}")
    return response.content


def parse_feed(content: bytes, url: str = "<feed>") -> list[FeedItem]:
    """Parse a syndication document into items, keeping document order.

    Raises:
        FetchError: If the body is not a feed or has no entries
    """
    safe_url = sanitize_for_log(url)
    parsed = feedparser.parse(content)

    if not parsed.entries:
        if parsed.bozo or not parsed.get("version"):
            reason = sanitize_for_log(parsed.get("bozo_exception")) if parsed.bozo else "unrecognized format"
            raise FetchError(f"feed {safe_url} is malformed: {reason}")
        raise FetchError(f"feed {safe_url} has no items")

    if parsed.bozo:
        logger.warning(f"Feed {safe_url} parsed with errors: {sanitize_for_log(parsed.get('bozo_exception'))}")

    return [FeedItem.from_entry(entry) for entry in parsed.entries]


def newest_item(items: list[FeedItem]) -> FeedItem:
    """First item of the feed, which is treated as the current story."""
    if not items:
        raise FetchError("feed has no items")
    return items[0]
