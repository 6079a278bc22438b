"""Application layer."""

from command_history.application.base import Command, MacroCommand
from command_history.application.history import HistoryManager
from command_history.application.triggers import TriggerBinding, TriggerPanel

__all__ = [
    "Command",
    "MacroCommand",
    "HistoryManager",
    "TriggerBinding",
    "TriggerPanel",
]
