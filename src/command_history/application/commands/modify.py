"""Generic field-modification command and the accessors that configure it.

A single ``ModifyCommand`` covers every "set this field to that value"
operation. What differs between operations (which field, and which object
owns it) lives in the ``FieldAccessor`` it is built with.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Hashable, List

from command_history.application.base import Command
from command_history.infrastructure.logging import get_logger
from command_history.shared.exceptions import PreconditionError
from command_history.shared.types import FieldAccessor

logger = get_logger(__name__)


def attribute_accessor(obj: Any, name: str) -> FieldAccessor:
    """Access ``obj.<name>`` through getattr/setattr."""
    return FieldAccessor(
        get=lambda: getattr(obj, name),
        set=lambda value: setattr(obj, name, value),
        label=name,
    )


def item_accessor(mapping: MutableMapping, key: Hashable) -> FieldAccessor:
    """Access ``mapping[key]``."""
    def _set(value: Any) -> None:
        mapping[key] = value

    return FieldAccessor(get=lambda: mapping[key], set=_set, label=str(key))


def _read(owner: Any, segment: str) -> Any:
    if isinstance(owner, Mapping):
        return owner[segment]
    return getattr(owner, segment)


def _write(owner: Any, segment: str, value: Any) -> None:
    if isinstance(owner, MutableMapping):
        owner[segment] = value
    else:
        setattr(owner, segment, value)


def path_accessor(root: Any, path: str) -> FieldAccessor:
    """Access a field by dotted key path, e.g. ``"style.color"``.

    Every segment but the last selects a sub-object, by item for mappings
    and by attribute otherwise. The path is walked again on each get/set,
    so a sub-object that disappears surfaces as the usual
    ``KeyError``/``AttributeError``.

    Args:
        root: Object the path starts from
        path: Dot-separated segments

    Returns:
        FieldAccessor for the final segment

    Raises:
        ValueError: If the path has an empty segment
    """
    segments = path.split(".")
    if not all(segments):
        raise ValueError(f"Invalid key path: {path!r}")
    *parents, leaf = segments

    def _owner() -> Any:
        owner = root
        for segment in parents:
            owner = _read(owner, segment)
        return owner

    return FieldAccessor(
        get=lambda: _read(_owner(), leaf),
        set=lambda value: _write(_owner(), leaf, value),
        label=path,
    )


class ModifyCommand(Command):
    """Set one field of a target to a new value, reversibly.

    Each ``execute`` pushes the value it overwrote and each ``undo`` pops
    one, so the same instance can sit in a history log more than once and
    still unwind to the true original.
    """

    def __init__(
        self,
        accessor: FieldAccessor,
        new_value: Any,
        description: str = "",
        target: Any = None,
    ):
        """Initialize modify command.

        Args:
            accessor: Get/set pair for the mutated field
            new_value: Value written on execute
            description: Human-readable description
            target: Object owning the field, kept for reference only
        """
        super().__init__(description or f"Set {accessor.label} to {new_value!r}")
        self.accessor = accessor
        self.new_value = new_value
        self.target = target
        self._prior_values: List[Any] = []

    @classmethod
    def for_key(
        cls,
        target: Any,
        key: Hashable,
        new_value: Any,
        description: str = "",
    ) -> "ModifyCommand":
        """Build a command for ``target[key]`` or ``target.key``.

        Dotted string keys are treated as key paths. Otherwise mappings get
        item access and everything else attribute access.
        """
        accessor: FieldAccessor
        if isinstance(key, str) and "." in key:
            accessor = path_accessor(target, key)
        elif isinstance(target, Mapping):
            accessor = item_accessor(target, key)
        else:
            accessor = attribute_accessor(target, key)
        return cls(accessor, new_value, description=description, target=target)

    @property
    def prior_value(self) -> Any:
        """Value overwritten by the most recent unreverted execute.

        Raises:
            PreconditionError: If nothing has been captured
        """
        if not self._prior_values:
            raise PreconditionError(
                f"{self.get_description()!r} has no captured prior value",
                command=self,
            )
        return self._prior_values[-1]

    @property
    def is_applied(self) -> bool:
        """Whether at least one execute is still unreverted."""
        return bool(self._prior_values)

    def execute(self) -> None:
        """Capture the current value and write the new one."""
        previous = self.accessor.get()
        self.accessor.set(self.new_value)
        self._prior_values.append(previous)
        logger.trace(f"{self.accessor.label}: {previous!r} -> {self.new_value!r}")

    def undo(self) -> None:
        """Write back the value captured by the latest execute.

        Raises:
            PreconditionError: If called with no unreverted execute
        """
        if not self._prior_values:
            raise PreconditionError(
                f"Cannot revert {self.get_description()!r} before it is applied",
                command=self,
            )
        previous = self._prior_values[-1]
        self.accessor.set(previous)
        self._prior_values.pop()
        logger.trace(f"{self.accessor.label}: restored {previous!r}")

    def forget(self) -> None:
        """Drop the oldest captured value.

        The oldest applied history entry holding this command owns the
        bottom of the stack.
        """
        if self._prior_values:
            self._prior_values.pop(0)


def modify(target: Any, key: Hashable, new_value: Any, description: str = "") -> ModifyCommand:
    """Shorthand for ``ModifyCommand.for_key``."""
    return ModifyCommand.for_key(target, key, new_value, description=description)
