"""Read-only views a renderer draws from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tedit.buffer.state import Cursor, Viewport


@dataclass(frozen=True, slots=True)
class VisibleLine:
    number: int  # 1-based
    text: str


@dataclass(frozen=True, slots=True)
class StatusSummary:
    display_name: str
    line_count: int
    modified: bool
    row: int  # 1-based
    col: int  # 1-based

    @property
    def left(self) -> str:
        modified = " (modified)" if self.modified else ""
        return f" {self.display_name} - {self.line_count} lines{modified}"

    @property
    def right(self) -> str:
        return f"{self.row}/{self.col} "

    def format(self, width: int) -> str:
        """Pad between the two halves, or cut the left half to fit."""

        left, right = self.left, self.right
        if len(left) + len(right) < width:
            return left + " " * (width - len(left) - len(right)) + right
        return (left[: max(0, width - len(right))] + right)[:width]


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    lines: tuple[VisibleLine, ...]
    cursor: Cursor  # screen position: (row - scroll_offset, col)
    status: StatusSummary
    message: str
    viewport: Viewport
    prompt: Optional[str] = None


__all__ = ["VisibleLine", "StatusSummary", "SessionSnapshot"]
