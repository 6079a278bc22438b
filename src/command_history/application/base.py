"""Command pattern base classes for undo/redo."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from command_history.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """Abstract base class for reversible commands."""

    def __init__(self, description: str = ""):
        """Initialize command.

        Args:
            description: Human-readable description
        """
        self.description = description

    @abstractmethod
    def execute(self) -> None:
        """Apply the command to its target."""
        pass

    @abstractmethod
    def undo(self) -> None:
        """Revert the most recent application."""
        pass

    def redo(self) -> None:
        """Redo the command (default: re-execute)."""
        self.execute()

    def forget(self) -> None:
        """Release state kept for the oldest unreverted execute.

        Called when the history drops an applied entry for good.
        """
        pass

    def get_description(self) -> str:
        """Get human-readable description."""
        return self.description or self.__class__.__name__

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.get_description()!r}>"


class MacroCommand(Command):
    """Command that groups multiple commands into one history entry."""

    def __init__(self, commands: Sequence[Command], description: str = ""):
        """Initialize macro command.

        Args:
            commands: Commands to execute, in order
            description: Description of the macro
        """
        super().__init__(description or "Macro Command")
        self.commands: List[Command] = list(commands)

    def execute(self) -> None:
        """Execute all commands in order."""
        for command in self.commands:
            command.execute()
        logger.debug(f"Executed macro: {self.description}")

    def undo(self) -> None:
        """Undo all commands in reverse order."""
        for command in reversed(self.commands):
            command.undo()
        logger.debug(f"Undone macro: {self.description}")

    def forget(self) -> None:
        """Release every child."""
        for command in self.commands:
            command.forget()

    def get_description(self) -> str:
        """Get description including command count."""
        return f"{self.description} ({len(self.commands)} operations)"
