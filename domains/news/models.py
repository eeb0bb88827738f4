"""News relay data types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class FeedItem:
    """One entry of the fetched feed. Lives for a single tick."""

    link: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_entry(cls, entry) -> "FeedItem":
        """Build from a feedparser entry; blank fields become None.

        feedparser copies a permalink <guid> into `link` when the item has
        no <link>; only real link elements (recorded in `links`) count.
        """
        link = _clean(entry.get("link"))
        if link and entry.get("guidislink") and not _has_link_element(entry):
            link = None
        return cls(link=link, title=_clean(entry.get("title")))


def _has_link_element(entry) -> bool:
    return any(_clean(l.get("href")) for l in entry.get("links") or [])


class PostDecision(Enum):
    POST = "post"
    SKIP = "skip"


class TickOutcome(Enum):
    """Result of one scheduled run."""

    POSTED = "posted"
    DUPLICATE = "duplicate"
    FAILED = "failed"
