"""News Relay scheduled job.

Every POLL_INTERVAL_SECONDS the newest story of the configured RSS feed is
posted to the news channel as a bare link, unless the channel's newest
message is already that link. State is rebuilt from the channel each run,
so nothing is stored between runs.
"""

import asyncio

from config import POLL_INTERVAL_SECONDS, TICK_TIMEOUT_SECONDS
from logger import logger
from utils import sanitize_for_log
from domains.news.config import JOB_ID, HISTORY_LIMIT
from domains.news.dedup import decide
from domains.news.errors import NewsRelayError
from domains.news.gateway import resolve_channel, fetch_recent_messages, send_message
from domains.news.models import PostDecision, TickOutcome
from domains.news.services import fetch_feed_items, newest_item


async def relay_latest_story(bot, rss_url: str, channel_id: int) -> str | None:
    """Fetch the feed and post its newest link if it is new.

    Returns:
        The posted link, or None if it was already the channel's last message

    Raises:
        NewsRelayError: From whichever stage failed
    """
    items = await fetch_feed_items(rss_url)
    story = newest_item(items)

    channel = await resolve_channel(bot, channel_id)
    recent = await fetch_recent_messages(channel, limit=HISTORY_LIMIT)
    last_message = recent[0] if recent else None

    if decide(story, last_message) is PostDecision.SKIP:
        logger.info("No new articles")
        return None

    await send_message(channel, story.link)
    logger.info(f"Posted new article: {sanitize_for_log(story.link)}")
    return story.link


async def news_relay_tick(bot, rss_url: str, channel_id: int) -> TickOutcome:
    """Run one relay pass, containing every failure.

    Nothing escapes except cancellation, so one bad run never stops the
    scheduler or affects the next run.
    """
    try:
        posted = await asyncio.wait_for(
            relay_latest_story(bot, rss_url, channel_id),
            timeout=TICK_TIMEOUT_SECONDS
        )
    except NewsRelayError as e:
        logger.error(f"News relay failed at {e.stage} stage: {sanitize_for_log(e)}")
        return TickOutcome.FAILED
    except asyncio.TimeoutError:
        logger.error(f"News relay timed out after {TICK_TIMEOUT_SECONDS}s")
        return TickOutcome.FAILED
    except Exception as e:
        logger.exception(f"Unexpected error in news relay job: {sanitize_for_log(e)}")
        return TickOutcome.FAILED

    return TickOutcome.POSTED if posted else TickOutcome.DUPLICATE


def register_news_relay(scheduler, bot, settings):
    """Register the news relay job with the scheduler.

    Args:
        scheduler: APScheduler instance
        bot: Connected Discord bot, shared with the job
        settings: Validated RelaySettings
    """
    scheduler.add_job(
        news_relay_tick,
        'interval',
        args=[bot, settings.rss_url, settings.channel_id],
        seconds=POLL_INTERVAL_SECONDS,
        id=JOB_ID,
        max_instances=1,  # Prevent overlapping runs
        coalesce=True,    # Combine missed runs
        replace_existing=True,
    )
    logger.info(f"Registered news relay job (every {POLL_INTERVAL_SECONDS}s, channel {settings.channel_id})")
