"""Linear undo/redo history.

The manager keeps one ordered log of executed commands and a cursor into
it. Entries ``0..cursor`` are applied; entries after the cursor form the
redo branch, which is dropped as soon as a new command is executed.
"""

from typing import Callable, List, Optional, Tuple

from command_history.application.base import Command
from command_history.infrastructure.logging import get_logger
from command_history.utils.config import HistoryConfig, get_config

logger = get_logger(__name__)

ChangeCallback = Callable[["HistoryManager"], None]


class HistoryManager:
    """Executes commands and navigates their history.

    Not thread-safe: callers sharing one manager across threads must treat
    ``execute``, ``undo`` and ``redo`` as a single critical section.
    """

    def __init__(self, max_size: Optional[int] = 100):
        """Initialize history manager.

        Args:
            max_size: Maximum number of entries to keep, oldest dropped
                first. ``None`` keeps everything.
        """
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be positive or None, got {max_size}")
        self._max_size = max_size
        self._log: List[Command] = []
        self._cursor = -1
        self._change_callback: Optional[ChangeCallback] = None

    @classmethod
    def from_config(cls, settings: Optional[HistoryConfig] = None) -> "HistoryManager":
        """Build a manager from configuration.

        Args:
            settings: Validated settings; the global config when omitted

        Returns:
            HistoryManager sized by ``max_history``
        """
        if settings is None:
            settings = get_config().settings
        return cls(max_size=settings.max_history)

    def set_change_callback(self, callback: Optional[ChangeCallback]) -> None:
        """Set callback invoked with the manager after every state change.

        Args:
            callback: Function taking the manager, or None to remove it
        """
        self._change_callback = callback

    # -- entry points --

    def execute(self, command: Command) -> None:
        """Discard the redo branch, append and apply a command.

        Errors raised by the command propagate. The redo branch is already
        gone by then and the failed command stays at the tail, past the
        cursor.

        Args:
            command: Command to execute
        """
        if self._cursor < len(self._log) - 1:
            discarded = len(self._log) - 1 - self._cursor
            del self._log[self._cursor + 1:]
            logger.debug(f"Discarded {discarded} redo entries")

        self._log.append(command)
        command.execute()
        self._cursor = len(self._log) - 1

        if self._max_size is not None and len(self._log) > self._max_size:
            overflow = len(self._log) - self._max_size
            for index in range(min(overflow, self._cursor + 1)):
                self._log[index].forget()
            del self._log[:overflow]
            self._cursor -= overflow
            logger.debug(f"History full, dropped {overflow} oldest entries")

        logger.debug(f"Executed command: {command.get_description()}")
        self._notify()

    def undo(self) -> Optional[Command]:
        """Revert the command at the cursor and step back.

        Returns:
            The undone command, or None if nothing to undo
        """
        if self._cursor < 0:
            logger.debug("Nothing to undo")
            return None

        command = self._log[self._cursor]
        command.undo()
        self._cursor -= 1

        logger.debug(f"Undone command: {command.get_description()}")
        self._notify()
        return command

    def redo(self) -> Optional[Command]:
        """Step forward and re-apply the command there.

        Returns:
            The redone command, or None if nothing to redo
        """
        if self._cursor >= len(self._log) - 1:
            logger.debug("Nothing to redo")
            return None

        self._cursor += 1
        command = self._log[self._cursor]
        command.redo()

        logger.debug(f"Redone command: {command.get_description()}")
        self._notify()
        return command

    def clear(self) -> None:
        """Forget all history without touching any target."""
        for command in self._log[:self._cursor + 1]:
            command.forget()
        self._log.clear()
        self._cursor = -1
        logger.debug("Cleared command history")
        self._notify()

    # -- queries --

    @property
    def cursor(self) -> int:
        """Index of the last applied entry, -1 before the first."""
        return self._cursor

    @property
    def commands(self) -> Tuple[Command, ...]:
        """Snapshot of the log in execution order."""
        return tuple(self._log)

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    @property
    def can_undo(self) -> bool:
        return self._cursor >= 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._log) - 1

    @property
    def undo_description(self) -> Optional[str]:
        """Description of the command ``undo`` would revert."""
        if self.can_undo:
            return self._log[self._cursor].get_description()
        return None

    @property
    def redo_description(self) -> Optional[str]:
        """Description of the command ``redo`` would re-apply."""
        if self.can_redo:
            return self._log[self._cursor + 1].get_description()
        return None

    def __len__(self) -> int:
        return len(self._log)

    def _notify(self) -> None:
        if self._change_callback is not None:
            self._change_callback(self)
