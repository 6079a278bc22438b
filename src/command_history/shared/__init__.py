"""Shared utilities and types."""

from command_history.shared.types import (
    Getter,
    Setter,
    FieldAccessor,
    TriggerAction,
)
from command_history.shared.exceptions import (
    CommandHistoryError,
    PreconditionError,
    BindingError,
    ConfigError,
)

__all__ = [
    "Getter",
    "Setter",
    "FieldAccessor",
    "TriggerAction",
    "CommandHistoryError",
    "PreconditionError",
    "BindingError",
    "ConfigError",
]
