"""Infrastructure layer - technical concerns."""

from command_history.infrastructure.logging import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
