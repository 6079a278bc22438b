"""Core type definitions used throughout the application."""

from enum import Enum
from typing import Any, Callable, TypeAlias
from dataclasses import dataclass

# Accessor halves
Getter: TypeAlias = Callable[[], Any]
Setter: TypeAlias = Callable[[Any], None]


class TriggerAction(str, Enum):
    """What a trigger does to the history when fired."""
    EXECUTE = "execute"
    UNDO = "undo"
    REDO = "redo"


@dataclass(frozen=True)
class FieldAccessor:
    """Immutable get/set pair addressing one field of a target.

    ``label`` names the field in descriptions and log output.
    """
    get: Getter
    set: Setter
    label: str = "value"

    def __post_init__(self):
        if not callable(self.get) or not callable(self.set):
            raise TypeError(f"Accessor for {self.label!r} needs callable get and set")
