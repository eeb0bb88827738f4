"""News relay domain - posts the newest feed story to a channel."""

from .errors import NewsRelayError, FetchError, DedupInputError, HistoryQueryError, PostError
from .models import FeedItem, PostDecision, TickOutcome
from .dedup import decide

__all__ = [
    "NewsRelayError",
    "FetchError",
    "DedupInputError",
    "HistoryQueryError",
    "PostError",
    "FeedItem",
    "PostDecision",
    "TickOutcome",
    "decide",
]
