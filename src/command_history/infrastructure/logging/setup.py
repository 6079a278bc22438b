"""Logging setup for Command History."""

from pathlib import Path
from typing import Optional
import sys

from loguru import logger


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True,
    json_format: bool = False,
):
    """Setup application logging.

    Args:
        level: Logging level
        log_file: Optional log file path
        console_output: Whether to log to stderr
        json_format: Write the file sink as JSON lines

    Returns:
        Configured logger instance
    """
    log_level = level.upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    # Remove default handler
    logger.remove()

    # Records logged through the bare loguru logger have no bound name
    logger.configure(extra={"name": "command_history"})

    # TRACE already exists in loguru (no=5); only restyle it
    logger.level("TRACE", color="<blue>", icon="🔍")

    if console_output:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        if json_format:
            logger.add(log_file, level=log_level, format="{message}", serialize=True)
        else:
            logger.add(
                log_file,
                level=log_level,
                format=FILE_FORMAT,
                rotation="10 MB",
                retention="7 days",
                compression="zip",
            )

    logger.debug(f"Logging initialized at level {log_level}")
    return logger


def get_logger(name: str):
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logger.bind(name=name)
