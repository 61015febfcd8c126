"""Editing verbs bound to keys through the keymap registry."""

from .core import quit_session
from .editing import backspace, delete_forward, insert_text, split_line
from .file import SAVE_PROMPT, save, save_as
from .motion import move_down, move_end, move_home, move_left, move_right, move_up
from .result import ActionResult

__all__ = [
    "ActionResult",
    "quit_session",
    "insert_text",
    "split_line",
    "backspace",
    "delete_forward",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
    "save",
    "save_as",
    "SAVE_PROMPT",
]
