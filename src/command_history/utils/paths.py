"""Common path utilities."""

import sys
from pathlib import Path

def get_config_dir() -> Path:
    """Get configuration directory."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Roaming" / "CommandHistory"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "Command History"
    else:
        return Path.home() / ".config" / "command-history"
