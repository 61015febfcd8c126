"""Cursor movement actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tedit.buffer.validation import clamp_column

from .result import ActionResult

if TYPE_CHECKING:
    from tedit.keymaps.resolver import ResolutionMatch
    from tedit.session import EditSession


def _moved(session: "EditSession", row: int, col: int) -> ActionResult:
    session.state.set_cursor(row, col)
    session.rescroll()
    return ActionResult(consumed=True, status="move")


def move_up(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    row, col = session.state.cursor
    if row > 0:
        row -= 1
    return _moved(session, row, clamp_column(session.document, row, col))


def move_down(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    row, col = session.state.cursor
    if row + 1 < session.document.line_count:
        row += 1
    return _moved(session, row, clamp_column(session.document, row, col))


def move_left(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    row, col = session.state.cursor
    if col > 0:
        return _moved(session, row, col - 1)
    if row > 0:
        return _moved(session, row - 1, session.document.line_length(row - 1))
    return _moved(session, row, col)


def move_right(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    document = session.document
    row, col = session.state.cursor
    if col < document.line_length(row):
        return _moved(session, row, col + 1)
    if row < document.line_count - 1:
        return _moved(session, row + 1, 0)
    return _moved(session, row, col)


def move_home(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    row, _ = session.state.cursor
    session.state.set_cursor(row, 0)
    return ActionResult(consumed=True, status="move")


def move_end(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    row, _ = session.state.cursor
    session.state.set_cursor(row, session.document.line_length(row))
    return ActionResult(consumed=True, status="move")


__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
]
