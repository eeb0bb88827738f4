"""Logging configuration for the News Relay bot.

Feed URLs, gateway errors and discord.py's own records can carry secrets,
so every handler formats through `RedactingFormatter`.
"""

import logging
import sys
from datetime import datetime

from config import LOG_DIR
from utils.log_sanitizer import sanitize_log

LOGGER_NAME = "news_relay"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


class RedactingFormatter(logging.Formatter):
    """Formatter that strips credentials from the rendered line, tracebacks included."""

    def format(self, record: logging.LogRecord) -> str:
        return sanitize_log(super().format(record))


def log_file_for(day: datetime):
    """Dated log file; one file per calendar day of process start."""
    return LOG_DIR / f"{day.strftime('%Y-%m-%d')}.log"


def setup_logging() -> logging.Logger:
    """Set up the relay logger and route discord.py's logger to the same file."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file_for(datetime.now()), encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(RedactingFormatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    # Gateway reconnects and rate limits are logged by discord.py itself
    discord_logger = logging.getLogger("discord")
    discord_logger.setLevel(logging.WARNING)
    discord_logger.addHandler(file_handler)

    # Console handler (only if not running as background)
    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(RedactingFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    return logger


# Global logger instance
logger = setup_logging()
