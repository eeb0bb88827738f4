"""News Relay - Main Bot.

Posts the newest story from an RSS feed into a Discord channel on a fixed
interval, skipping the post when the channel already shows that story.
"""

import sys
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from logger import logger
from config import COMMAND_PREFIXES, ConfigError, load_settings
from domains.news.config import JOB_ID
from domains.news.help import build_help_text, matching_command_names
from jobs import register_news_relay

# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(
    command_prefix=COMMAND_PREFIXES,
    intents=intents,
    strip_after_prefix=True,
    help_command=None,
)

# Initialize scheduler
scheduler = AsyncIOScheduler()

# Bound in main() before connecting
settings = None


@bot.event
async def on_ready():
    """Called when bot is connected and ready (also after reconnects)."""
    logger.info(f"Logged in as {bot.user}")

    # Sync slash commands with Discord
    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} slash commands")
    except discord.HTTPException as e:
        logger.error(f"Failed to sync slash commands: {e}")

    if scheduler.get_job(JOB_ID) is None:
        register_news_relay(scheduler, bot, settings)

    if not scheduler.running:
        scheduler.start()
        logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")


@bot.event
async def on_socket_event_type(event_type):
    """Trace gateway events."""
    logger.info(f"Got an event in event handler: {event_type.lower()}")


@bot.before_invoke
async def before_command(ctx: commands.Context):
    logger.info(f"Executing command {ctx.command.qualified_name}...")


@bot.after_invoke
async def after_command(ctx: commands.Context):
    if not ctx.command_failed:
        logger.info(f"Executed command {ctx.command.qualified_name}!")


@bot.event
async def on_command_error(ctx: commands.Context, error: commands.CommandError):
    """Log command failures; unknown prefixes are ignored."""
    if isinstance(error, commands.CommandNotFound):
        logger.debug(f"Unknown command: {error}")
        return
    name = ctx.command.qualified_name if ctx.command else "unknown"
    logger.error(f"Error in command `{name}`: {error!r}")


@bot.hybrid_command(name="help", description="Show this help menu")
@app_commands.describe(command="Specific command to show help about")
async def cmd_help(ctx: commands.Context, command: Optional[str] = None):
    """Show this help menu."""
    await ctx.send(build_help_text(bot.commands, command))


@cmd_help.autocomplete("command")
async def help_autocomplete(interaction: discord.Interaction, current: str):
    return [
        app_commands.Choice(name=name, value=name)
        for name in matching_command_names(bot.commands, current)
    ]


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.exception(f"Bot error in {event}")


def main():
    """Entry point."""
    global settings
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info("Starting News Relay bot...")
    bot.run(settings.token)


if __name__ == "__main__":
    main()
