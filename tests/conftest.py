"""Pytest configuration and fixtures."""

import os
import sys
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example News</title>
    <link>https://a/</link>
    <description>Latest stories</description>
    <item>
      <title>Second story</title>
      <link>https://a/2</link>
    </item>
    <item>
      <title>First story</title>
      <link>https://a/1</link>
    </item>
  </channel>
</rss>
"""


def make_rss(*items) -> bytes:
    """Build an RSS 2.0 document from (title, link) pairs; None omits the element."""
    entries = []
    for title, link in items:
        parts = []
        if title is not None:
            parts.append(f"<title>{title}</title>")
        if link is not None:
            parts.append(f"<link>{link}</link>")
        entries.append(f"<item>{''.join(parts)}</item>")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Example News</title>'
        '<link>https://a/</link><description>Latest stories</description>'
        f"{''.join(entries)}</channel></rss>"
    ).encode("utf-8")


class MockChannel:
    """Mock Discord guild text channel for testing.

    `messages` is oldest first, like the channel as a user scrolls it.
    """

    def __init__(self, channel_id=1234, messages=None):
        self.id = channel_id
        self.guild = Mock(name="guild")
        self.messages = list(messages or [])
        self.sent_messages = []
        self.history_error = None
        self.send_error = None
        self.history_calls = []

    def history(self, limit=100):
        self.history_calls.append(limit)
        return self._iter_history(limit)

    async def _iter_history(self, limit):
        if self.history_error is not None:
            raise self.history_error
        for content in list(reversed(self.messages))[:limit]:
            yield SimpleNamespace(content=content)

    async def send(self, content):
        if self.send_error is not None:
            raise self.send_error
        self.sent_messages.append(content)
        self.messages.append(content)


class MockBot:
    """Mock Discord bot holding a single channel."""

    def __init__(self, channel=None, cached=True):
        self.channel = channel or MockChannel()
        self.cached = cached
        self.fetch_calls = 0

    def get_channel(self, channel_id):
        if self.cached and channel_id == self.channel.id:
            return self.channel
        return None

    async def fetch_channel(self, channel_id):
        self.fetch_calls += 1
        return self.channel


@pytest.fixture
def mock_channel():
    return MockChannel()


@pytest.fixture
def mock_discord_bot(mock_channel):
    """Create a mock Discord bot."""
    return MockBot(mock_channel)


@pytest.fixture
def rss():
    """Builder for RSS documents: rss(("title", "link"), ...)."""
    return make_rss


@pytest.fixture
def uncached_bot(mock_channel):
    """Bot whose channel cache is empty, forcing a fetch_channel call."""
    return MockBot(mock_channel, cached=False)
