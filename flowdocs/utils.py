import sys

from loguru import logger

_LOGURU_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "error": "ERROR",
}


def setup_logging(level: str = "info") -> None:
    """
    Route loguru output to stderr at the configured level.

    stdout carries the protocol stream, so the default sink is replaced
    rather than extended.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=_LOGURU_LEVELS.get(level.lower(), "INFO"),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
        backtrace=False,
    )
