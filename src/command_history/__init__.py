"""Command History - linear undo/redo over reversible commands."""

from command_history.application import (
    Command,
    MacroCommand,
    HistoryManager,
    TriggerBinding,
    TriggerPanel,
)
from command_history.application.commands import ModifyCommand, modify
from command_history.shared.exceptions import (
    CommandHistoryError,
    PreconditionError,
    BindingError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Command",
    "MacroCommand",
    "HistoryManager",
    "TriggerBinding",
    "TriggerPanel",
    "ModifyCommand",
    "modify",
    "CommandHistoryError",
    "PreconditionError",
    "BindingError",
    "ConfigError",
]
