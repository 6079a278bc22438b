"""Trigger sources: named actions wired to a history manager.

A trigger is whatever external stimulus (a button, a key binding, a line of
console input) should run a prebuilt command, undo or redo. Bindings hold
their manager and command by reference; there is no global registry.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from command_history.application.base import Command
from command_history.application.history import HistoryManager
from command_history.infrastructure.logging import get_logger
from command_history.shared.exceptions import BindingError
from command_history.shared.types import TriggerAction

logger = get_logger(__name__)


@dataclass(frozen=True)
class TriggerBinding:
    """One trigger wired to one history action."""
    name: str
    action: TriggerAction
    manager: HistoryManager
    command: Optional[Command] = None

    def __post_init__(self):
        if self.action is TriggerAction.EXECUTE and self.command is None:
            raise BindingError(f"Trigger {self.name!r} executes but has no command", name=self.name)
        if self.action is not TriggerAction.EXECUTE and self.command is not None:
            raise BindingError(
                f"Trigger {self.name!r} is a {self.action.value} trigger and takes no command",
                name=self.name,
            )

    @property
    def enabled(self) -> bool:
        """Whether firing would change anything."""
        if self.action is TriggerAction.UNDO:
            return self.manager.can_undo
        if self.action is TriggerAction.REDO:
            return self.manager.can_redo
        return True

    def fire(self) -> Optional[Command]:
        """Perform the bound action.

        Returns:
            The command acted on, or None for an undo/redo at a boundary
        """
        logger.trace(f"Trigger fired: {self.name}")
        if self.action is TriggerAction.UNDO:
            return self.manager.undo()
        if self.action is TriggerAction.REDO:
            return self.manager.redo()
        self.manager.execute(self.command)
        return self.command


class TriggerPanel:
    """Named set of triggers sharing one history manager."""

    def __init__(self, manager: HistoryManager):
        """Initialize trigger panel.

        Args:
            manager: History the triggers act on
        """
        self.manager = manager
        self._bindings: Dict[str, TriggerBinding] = {}

    def bind(self, name: str, action: TriggerAction, command: Optional[Command] = None) -> TriggerBinding:
        """Register a trigger, replacing any existing one with that name."""
        binding = TriggerBinding(name, TriggerAction(action), self.manager, command)
        if name in self._bindings:
            logger.debug(f"Rebinding trigger {name!r}")
        self._bindings[name] = binding
        return binding

    def bind_command(self, name: str, command: Command) -> TriggerBinding:
        return self.bind(name, TriggerAction.EXECUTE, command)

    def bind_undo(self, name: str = "undo") -> TriggerBinding:
        return self.bind(name, TriggerAction.UNDO)

    def bind_redo(self, name: str = "redo") -> TriggerBinding:
        return self.bind(name, TriggerAction.REDO)

    def get(self, name: str) -> TriggerBinding:
        """Look up a trigger.

        Raises:
            BindingError: If no trigger has that name
        """
        try:
            return self._bindings[name]
        except KeyError:
            raise BindingError(f"Unknown trigger: {name!r}", name=name) from None

    def fire(self, name: str) -> Optional[Command]:
        """Fire the named trigger."""
        return self.get(name).fire()

    def enabled(self, name: str) -> bool:
        return self.get(name).enabled

    def names(self) -> List[str]:
        return list(self._bindings)

    def __contains__(self, name: str) -> bool:
        return name in self._bindings
