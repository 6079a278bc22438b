"""Command implementations."""

from command_history.application.commands.modify import (
    ModifyCommand,
    attribute_accessor,
    item_accessor,
    path_accessor,
    modify,
)
from command_history.application.commands.styling import (
    Element,
    Style,
    change_text,
    change_text_color,
    change_font_size,
)

__all__ = [
    "ModifyCommand",
    "attribute_accessor",
    "item_accessor",
    "path_accessor",
    "modify",
    "Element",
    "Style",
    "change_text",
    "change_text_color",
    "change_font_size",
]
