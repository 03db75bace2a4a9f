"""
Logging configuration for ranked roster.

Sets up loguru sinks for the console and rotating log files.
"""

import sys

from loguru import logger
from typing import Any

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = "INFO", debug: bool = False, log_file: str | None = "ranked_roster.log") -> None:
    """
    Configure loguru logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: If True, enable debug logging and a separate debug log file
        log_file: Path of the INFO-level log file, or None to log to stderr only
    """
    # Remove default handler
    logger.remove()

    log_level = "DEBUG" if debug else level

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT)

    if log_file is None:
        return

    logger.add(
        log_file,
        level="INFO",
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )

    if debug:
        logger.add(
            "ranked_roster_debug.log",
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="50 MB",
            retention="3 days",
            compression="zip",
        )


def get_logger(name: str | None = None) -> Any:
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger (defaults to calling module)

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger
