"""Preset commands for styling a text element.

These mirror the classic demo of the pattern: a heading whose text, colour
and font size are changed by buttons. Each preset is a factory returning a
configured ``ModifyCommand``; only the key path differs.
"""

from dataclasses import dataclass, field
from typing import Any

from command_history.application.commands.modify import ModifyCommand, path_accessor


@dataclass
class Style:
    """Inline style of an element."""
    color: str = "black"
    font_size: str = "16px"


@dataclass
class Element:
    """Minimal host-independent text element."""
    text_content: str = ""
    style: Style = field(default_factory=Style)

    def describe(self) -> str:
        return f"text={self.text_content!r} color={self.style.color!r} font_size={self.style.font_size!r}"


def _preset(element: Any, path: str, value: Any, description: str) -> ModifyCommand:
    return ModifyCommand(path_accessor(element, path), value, description=description, target=element)


def change_text(element: Any, value: str) -> ModifyCommand:
    """Replace the element's text."""
    return _preset(element, "text_content", value, f"Change text to {value!r}")


def change_text_color(element: Any, value: str) -> ModifyCommand:
    """Change the element's text colour."""
    return _preset(element, "style.color", value, f"Change color to {value!r}")


def change_font_size(element: Any, value: str) -> ModifyCommand:
    """Change the element's font size."""
    return _preset(element, "style.font_size", value, f"Change font size to {value!r}")
