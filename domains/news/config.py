"""News relay configuration."""

JOB_ID = "news_relay"

# Only the newest message decides whether the top story was already posted
HISTORY_LIMIT = 1

USER_AGENT = "news-relay-bot/1.0 (+https://discord.com)"

HELP_FOOTER = (
    "This discord bot fetches the latest news from RSS_URL env var and sends a "
    "message with the link to the channel with id CHANNEL_ID at specified intervals."
)
