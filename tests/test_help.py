"""Tests for the help menu text."""

from types import SimpleNamespace

from domains.news.config import HELP_FOOTER
from domains.news.help import build_help_text, matching_command_names

COMMANDS = [
    SimpleNamespace(name="help", description="Show this help menu", hidden=False),
    SimpleNamespace(name="debug", description="Internal", hidden=True),
]


def test_lists_visible_commands_with_footer():
    text = build_help_text(COMMANDS)

    assert "`/help` - Show this help menu" in text
    assert "debug" not in text
    assert text.endswith(HELP_FOOTER)


def test_single_command():
    text = build_help_text(COMMANDS, "~help")

    assert text.startswith("**/help**\nShow this help menu")
    assert text.endswith(HELP_FOOTER)


def test_unknown_command():
    text = build_help_text(COMMANDS, "weather")

    assert "No command called `weather` found." in text


def test_footer_mentions_env_vars():
    assert "RSS_URL" in HELP_FOOTER
    assert "CHANNEL_ID" in HELP_FOOTER


def test_autocomplete_prefix_match():
    assert matching_command_names(COMMANDS, "he") == ["help"]
    assert matching_command_names(COMMANDS, "") == ["help"]
    assert matching_command_names(COMMANDS, "x") == []
