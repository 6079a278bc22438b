"""Tests for the history manager."""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from command_history.application.base import Command
from command_history.application.commands.modify import modify
from command_history.application.history import HistoryManager
from command_history.shared.exceptions import PreconditionError
from command_history.utils.config import HistoryConfig


class RecordingCommand(Command):
    """Command that records calls into a shared journal."""

    def __init__(self, name: str, journal: list):
        super().__init__(f"Record {name}")
        self.name = name
        self.journal = journal

    def execute(self):
        self.journal.append(("execute", self.name))

    def undo(self):
        self.journal.append(("undo", self.name))


class FailingCommand(Command):
    """Command whose target has gone away."""

    def execute(self):
        raise AttributeError("target no longer exists")

    def undo(self):
        raise AttributeError("target no longer exists")


class TestHistoryManager:
    """Test HistoryManager cursor semantics."""

    def test_initial_state(self):
        h = HistoryManager()
        assert h.cursor == -1
        assert h.commands == ()
        assert len(h) == 0
        assert not h.can_undo
        assert not h.can_redo

    def test_execute_applies_and_advances(self):
        target = {"value": "A"}
        h = HistoryManager()
        command = modify(target, "value", "B")

        h.execute(command)

        assert target["value"] == "B"
        assert h.cursor == 0
        assert h.commands == (command,)
        assert h.can_undo
        assert not h.can_redo

    def test_concrete_scenario(self):
        target = {"value": "A"}
        h = HistoryManager()

        h.execute(modify(target, "value", "B"))
        assert target["value"] == "B"
        h.undo()
        assert target["value"] == "A"
        h.redo()
        assert target["value"] == "B"
        h.execute(modify(target, "value", "C"))
        assert target["value"] == "C"
        h.undo()
        h.undo()
        assert target["value"] == "A"
        assert h.undo() is None
        assert target["value"] == "A"
        assert h.cursor == -1

    def test_undo_at_start_is_noop(self):
        h = HistoryManager()
        assert h.undo() is None
        assert h.cursor == -1

    def test_redo_at_tail_is_noop(self):
        journal = []
        h = HistoryManager()
        h.execute(RecordingCommand("a", journal))

        assert h.redo() is None
        assert h.cursor == 0
        assert journal == [("execute", "a")]

    def test_undo_redo_return_command(self):
        journal = []
        h = HistoryManager()
        command = RecordingCommand("a", journal)
        h.execute(command)

        assert h.undo() is command
        assert h.redo() is command
        assert journal == [("execute", "a"), ("undo", "a"), ("execute", "a")]

    def test_branch_discard(self):
        journal = []
        h = HistoryManager()
        o1, o2, o3 = (RecordingCommand(n, journal) for n in ("o1", "o2", "o3"))

        h.execute(o1)
        h.execute(o2)
        h.undo()
        h.execute(o3)

        assert h.commands == (o1, o3)
        assert h.redo() is None
        assert ("execute", "o2") == journal[1]
        assert journal.count(("execute", "o2")) == 1

    def test_branch_discard_after_undoing_everything(self):
        journal = []
        h = HistoryManager()
        h.execute(RecordingCommand("a", journal))
        h.execute(RecordingCommand("b", journal))
        h.undo()
        h.undo()

        c = RecordingCommand("c", journal)
        h.execute(c)

        assert h.commands == (c,)
        assert h.cursor == 0

    def test_undo_all_restores_every_field(self):
        target = SimpleNamespace(text="t0", color="black", size=12)
        h = HistoryManager()

        h.execute(modify(target, "text", "t1"))
        h.execute(modify(target, "color", "blue"))
        h.execute(modify(target, "size", 25))
        h.execute(modify(target, "text", "t2"))

        for _ in range(4):
            h.undo()

        assert vars(target) == {"text": "t0", "color": "black", "size": 12}

    def test_independent_targets(self):
        x = {"value": 1}
        y = {"value": 100}
        h = HistoryManager()

        h.execute(modify(x, "value", 2))
        h.execute(modify(y, "value", 200))
        h.execute(modify(x, "value", 3))

        h.undo()
        assert x == {"value": 2}
        assert y == {"value": 200}
        h.undo()
        assert x == {"value": 2}
        assert y == {"value": 100}

    def test_same_command_executed_twice(self):
        """A prebuilt command fired twice unwinds to the true original."""
        target = {"color": "black"}
        h = HistoryManager()
        blue = modify(target, "color", "blue")

        h.execute(blue)
        h.execute(blue)
        assert h.commands == (blue, blue)

        h.undo()
        assert target["color"] == "blue"
        h.undo()
        assert target["color"] == "black"
        h.redo()
        h.redo()
        assert target["color"] == "blue"

    def test_same_command_interleaved(self):
        target = {"color": "black"}
        h = HistoryManager()
        blue = modify(target, "color", "blue")
        red = modify(target, "color", "red")

        h.execute(blue)
        h.execute(red)
        h.execute(blue)

        h.undo()
        assert target["color"] == "red"
        h.undo()
        assert target["color"] == "blue"
        h.undo()
        assert target["color"] == "black"

    def test_execute_failure_propagates_after_truncation(self):
        journal = []
        h = HistoryManager()
        a = RecordingCommand("a", journal)
        h.execute(a)
        h.execute(RecordingCommand("b", journal))
        h.undo()

        failing = FailingCommand("broken")
        with pytest.raises(AttributeError):
            h.execute(failing)

        # redo branch is gone; the failed command sits past the cursor
        assert h.commands == (a, failing)
        assert h.cursor == 0

    def test_undo_failure_leaves_cursor(self):
        target = SimpleNamespace(style=SimpleNamespace(color="black"))
        h = HistoryManager()
        h.execute(modify(target, "style.color", "blue"))

        del target.style
        with pytest.raises(AttributeError):
            h.undo()
        assert h.cursor == 0
        assert h.can_undo

    def test_redo_failure_advances_cursor(self):
        target = SimpleNamespace(style=SimpleNamespace(color="black"))
        h = HistoryManager()
        h.execute(modify(target, "style.color", "blue"))
        h.undo()

        del target.style
        with pytest.raises(AttributeError):
            h.redo()
        assert h.cursor == 0
        assert not h.can_redo

    def test_max_size_drops_oldest(self):
        journal = []
        h = HistoryManager(max_size=3)
        commands = [RecordingCommand(str(i), journal) for i in range(5)]
        for command in commands:
            h.execute(command)

        assert h.commands == tuple(commands[2:])
        assert h.cursor == 2
        assert h.undo() is commands[4]
        assert h.undo() is commands[3]
        assert h.undo() is commands[2]
        assert h.undo() is None

    def test_eviction_releases_captured_values(self):
        """A reused command holds no captures for entries the history dropped."""
        target = {"color": "black"}
        h = HistoryManager(max_size=3)
        blue = modify(target, "color", "blue")

        for _ in range(1000):
            h.execute(blue)

        for _ in range(3):
            h.undo()
        assert target["color"] == "blue"
        assert not blue.is_applied
        assert h.undo() is None

    def test_eviction_keeps_captures_of_retained_entries(self):
        target = {"color": "black"}
        h = HistoryManager(max_size=2)
        blue = modify(target, "color", "blue")
        red = modify(target, "color", "red")

        h.execute(blue)
        h.execute(red)
        h.execute(blue)

        assert h.commands == (red, blue)
        h.undo()
        assert target["color"] == "red"
        h.undo()
        assert target["color"] == "blue"
        assert not blue.is_applied
        assert not red.is_applied

    def test_eviction_forgets_each_dropped_entry(self):
        h = HistoryManager(max_size=2)
        commands = [modify({"v": 0}, "v", i) for i in range(4)]
        for command in commands:
            h.execute(command)

        assert [c.is_applied for c in commands] == [False, False, True, True]

    def test_unbounded_history(self):
        journal = []
        h = HistoryManager(max_size=None)
        for i in range(250):
            h.execute(RecordingCommand(str(i), journal))
        assert len(h) == 250

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_max_size(self, size):
        with pytest.raises(ValueError):
            HistoryManager(max_size=size)

    def test_from_config(self):
        h = HistoryManager.from_config(HistoryConfig(max_history=7))
        assert h.max_size == 7

    def test_clear(self):
        target = {"value": "A"}
        h = HistoryManager()
        h.execute(modify(target, "value", "B"))
        h.undo()

        h.clear()

        assert h.cursor == -1
        assert h.commands == ()
        assert not h.can_redo
        assert target["value"] == "A"

    def test_clear_releases_captured_values(self):
        target = {"color": "black"}
        h = HistoryManager()
        blue = modify(target, "color", "blue")
        h.execute(blue)

        h.clear()

        assert not blue.is_applied
        with pytest.raises(PreconditionError):
            blue.prior_value
        assert target["color"] == "blue"

    def test_clear_with_redo_branch(self):
        target = {"color": "black"}
        h = HistoryManager()
        blue = modify(target, "color", "blue")
        red = modify(target, "color", "red")
        h.execute(blue)
        h.execute(red)
        h.undo()

        h.clear()

        assert not blue.is_applied
        assert not red.is_applied

    def test_command_reused_after_clear(self):
        target = {"color": "black"}
        h = HistoryManager()
        blue = modify(target, "color", "blue")
        h.execute(blue)
        h.execute(blue)
        h.clear()

        target["color"] = "green"
        h.execute(blue)
        h.undo()

        assert target["color"] == "green"
        assert not blue.is_applied

    def test_descriptions(self):
        h = HistoryManager()
        h.execute(modify({"color": "black"}, "color", "blue"))

        assert h.undo_description == "Set color to 'blue'"
        assert h.redo_description is None
        h.undo()
        assert h.undo_description is None
        assert h.redo_description == "Set color to 'blue'"

    def test_commands_is_a_snapshot(self):
        journal = []
        h = HistoryManager()
        h.execute(RecordingCommand("a", journal))

        snapshot = h.commands
        h.execute(RecordingCommand("b", journal))

        assert len(snapshot) == 1

    def test_change_callback(self):
        callback = MagicMock()
        h = HistoryManager()
        h.set_change_callback(callback)

        h.execute(RecordingCommand("a", []))
        h.undo()
        h.undo()  # boundary, no notification
        h.redo()
        h.clear()

        assert callback.call_count == 4
        callback.assert_called_with(h)

    def test_change_callback_removed(self):
        callback = MagicMock()
        h = HistoryManager()
        h.set_change_callback(callback)
        h.set_change_callback(None)

        h.execute(RecordingCommand("a", []))
        callback.assert_not_called()
