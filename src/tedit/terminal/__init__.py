"""Terminal host interface, ANSI renderer and the input loop."""

from .host import TerminalHost
from .renderer import ScreenRenderer, move_cursor
from .runner import build_viewport, run_session

__all__ = [
    "TerminalHost",
    "ScreenRenderer",
    "move_cursor",
    "build_viewport",
    "run_session",
]
