"""ANSI frame builder for session snapshots."""

from __future__ import annotations

from typing import List

from tedit.session.snapshot import SessionSnapshot

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE = "\x1b[K"
STATUS_COLORS = "\x1b[48;2;238;238;238m\x1b[38;2;0;0;0m"
RESET_COLORS = "\x1b[0m"


def move_cursor(row: int, col: int) -> str:
    return f"\x1b[{row + 1};{col + 1}H"


class ScreenRenderer:
    """Builds one full frame per snapshot.

    Layout: ``viewport.height`` text rows with a line-number gutter, one
    status bar, one message bar. Text wider than the viewport is cut.
    """

    def __init__(self, *, gutter_width: int = 5) -> None:
        self.gutter_width = gutter_width

    def gutter(self, number: int | None) -> str:
        label = "~" if number is None else str(number)
        return f"{label:>{self.gutter_width - 1}} "

    def render(self, snapshot: SessionSnapshot) -> str:
        viewport = snapshot.viewport
        columns = viewport.width + self.gutter_width
        parts: List[str] = [HIDE_CURSOR, CURSOR_HOME]

        for screen_row in range(viewport.height):
            parts.append(CLEAR_LINE)
            if screen_row < len(snapshot.lines):
                line = snapshot.lines[screen_row]
                parts.append(self.gutter(line.number) + line.text[: viewport.width])
            else:
                parts.append(self.gutter(None))
            parts.append("\r\n")

        status = snapshot.status.format(columns)[:columns]
        parts.extend([STATUS_COLORS, status, RESET_COLORS, "\r\n"])
        parts.extend([CLEAR_LINE, snapshot.message[:columns]])

        if snapshot.prompt is not None:
            row, col = viewport.height + 1, len(snapshot.prompt)
        else:
            row, col = snapshot.cursor
            col += self.gutter_width
        parts.append(move_cursor(row, min(col, columns - 1)))
        parts.append(SHOW_CURSOR)
        return "".join(parts)

    def clear(self) -> str:
        return CLEAR_SCREEN + move_cursor(0, 0)


__all__ = ["ScreenRenderer", "move_cursor"]
