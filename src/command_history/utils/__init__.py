"""Utilities package for Command History."""

from command_history.utils.paths import (
    get_config_dir,
)

__all__ = [
    "get_config_dir",
]
