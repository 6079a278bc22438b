"""Configuration management for Command History."""

import json
from pathlib import Path
from typing import Dict, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from command_history.infrastructure.logging import get_logger
from command_history.shared.exceptions import ConfigError
from command_history.utils.paths import get_config_dir

logger = get_logger(__name__)


class HistoryConfig(BaseModel):
    """Validated settings for a history manager and its logging."""
    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    max_history: Optional[int] = Field(default=100, ge=1)
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[Path] = None
    json_logs: bool = False


class Config:
    """Configuration manager for Command History."""

    DEFAULT_CONFIG = HistoryConfig().model_dump(mode="json")

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager.

        Args:
            config_path: Explicit config file; defaults to the platform
                config directory
        """
        self.config_path = Path(config_path) if config_path else self._get_config_path()
        self.config = self._load_config()

    def _get_config_path(self) -> Path:
        """Get configuration file path.

        Returns:
            Path to config file
        """
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir / "config.json"

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file.

        Unreadable files and invalid values fall back to the defaults.

        Returns:
            Configuration dictionary
        """
        config = self.DEFAULT_CONFIG.copy()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    user_config = json.load(f)
                merged = {**config, **user_config}
                HistoryConfig.model_validate(merged)
                config = merged
                logger.info(f"Loaded config from {self.config_path}")
            except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
                logger.error(f"Failed to load config: {e}")

        return config

    def save(self) -> None:
        """Save configuration to file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=2)
            logger.info(f"Saved config to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            key: Configuration key
            value: Configuration value

        Raises:
            ConfigError: If the value does not validate
        """
        self.update({key: value})

    def update(self, updates: Dict[str, Any]) -> None:
        """Update multiple configuration values.

        Args:
            updates: Dictionary of updates

        Raises:
            ConfigError: If any value does not validate
        """
        merged = {**self.config, **updates}
        try:
            validated = HistoryConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", updates=updates) from e
        self.config = validated.model_dump(mode="json")

    @property
    def settings(self) -> HistoryConfig:
        """Validated view of the current configuration."""
        return HistoryConfig.model_validate(self.config)


def get_config() -> Config:
    """Get global config instance.

    Returns:
        Config instance
    """
    if not hasattr(get_config, '_instance'):
        get_config._instance = Config()
    return get_config._instance
