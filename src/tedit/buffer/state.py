"""Cursor and viewport state owned by an edit session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class Viewport:
    """Fixed-size window of text rows; never resized during a session."""

    height: int
    width: int

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ValueError("viewport height must be at least 1")
        if self.width < 1:
            raise ValueError("viewport width must be at least 1")


@dataclass(slots=True)
class SessionState:
    """Mutable cursor + scroll info tied to one document."""

    viewport: Viewport
    cursor: Cursor = (0, 0)
    scroll_offset: int = 0

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def rescroll(self) -> None:
        """Move the window just far enough to keep the cursor row visible."""

        row = self.cursor[0]
        height = self.viewport.height
        if row < self.scroll_offset:
            self.scroll_offset = row
        if row >= self.scroll_offset + height:
            self.scroll_offset = row - height + 1

    @property
    def screen_cursor(self) -> Cursor:
        row, col = self.cursor
        return (row - self.scroll_offset, col)
