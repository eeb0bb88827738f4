"""News relay services."""

from .feeds import fetch_feed_items, parse_feed, newest_item

__all__ = ["fetch_feed_items", "parse_feed", "newest_item"]
