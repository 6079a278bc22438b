"""Custom exceptions for Command History."""


class CommandHistoryError(Exception):
    """Base exception for all Command History errors."""
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)

class PreconditionError(CommandHistoryError):
    """Command reverted without a captured prior value."""
    pass

class BindingError(CommandHistoryError):
    """Trigger binding misconfigured or unknown."""
    pass

class ConfigError(CommandHistoryError):
    """Invalid configuration value."""
    pass
