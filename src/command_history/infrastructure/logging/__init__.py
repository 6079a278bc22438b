"""Logging infrastructure backed by loguru."""

from command_history.infrastructure.logging.setup import (
    LOG_LEVELS,
    setup_logging,
    get_logger,
)

__all__ = ["LOG_LEVELS", "setup_logging", "get_logger"]
