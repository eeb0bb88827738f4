"""Decide whether the newest feed item has already been posted.

The channel itself is the record of what was posted: every post is exactly
the item's link, so the newest channel message is compared with the
candidate link. Anyone else posting into the channel breaks this, which is
a known limitation.
"""

from typing import Optional

from .errors import DedupInputError
from .models import FeedItem, PostDecision


def decide(candidate: FeedItem, last_message: Optional[str]) -> PostDecision:
    """Return POST if the candidate is new relative to the last message.

    Args:
        candidate: Newest item from the feed
        last_message: Text of the channel's most recent message, or None if
            the channel has no messages

    Raises:
        DedupInputError: If the candidate has no link
    """
    if not candidate.link:
        raise DedupInputError(f"newest feed item has no link (title: {candidate.title!r})")

    if last_message is None:
        return PostDecision.POST

    # Exact comparison; titles and other metadata are ignored
    if last_message == candidate.link:
        return PostDecision.SKIP

    return PostDecision.POST
