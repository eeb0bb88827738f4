"""Per-stage failures of a news relay tick.

Each error names the stage it came from so a single handler at the tick
boundary can log which step failed. None of them is fatal to the process.
"""


class NewsRelayError(Exception):
    """Base class for a failed tick."""

    stage = "relay"


class FetchError(NewsRelayError):
    """Feed could not be fetched, parsed, or had no items."""

    stage = "fetch"


class DedupInputError(NewsRelayError):
    """Newest feed item cannot be compared or posted (no link)."""

    stage = "dedup"


class HistoryQueryError(NewsRelayError):
    """Target channel or its recent messages could not be read."""

    stage = "history"


class PostError(NewsRelayError):
    """Gateway rejected the message send."""

    stage = "post"
