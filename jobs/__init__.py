"""Scheduled jobs."""

from .news_relay import register_news_relay

__all__ = ["register_news_relay"]
