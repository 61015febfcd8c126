"""Text-changing actions: insert, split, backspace and forward delete."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .result import ActionResult

if TYPE_CHECKING:
    from tedit.keymaps.resolver import ResolutionMatch
    from tedit.session import EditSession


def insert_text(session: "EditSession", ch: str) -> ActionResult:
    document = session.document
    row, col = session.state.cursor
    document.insert_char(row, col, ch)
    session.state.set_cursor(row, min(col + 1, document.line_length(row)))
    return ActionResult(consumed=True, status="insert")


def split_line(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    row, col = session.state.cursor
    session.document.split_line(row, col)
    session.state.set_cursor(row + 1, 0)
    session.rescroll()
    return ActionResult(consumed=True, status="split_line")


def backspace(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    document = session.document
    row, col = session.state.cursor
    if col > 0:
        document.delete_char(row, col - 1)
        session.state.set_cursor(row, col - 1)
        return ActionResult(consumed=True, status="delete_back")
    if row > 0:
        joined_col = document.line_length(row - 1)
        document.join_with_previous(row)
        session.state.set_cursor(row - 1, joined_col)
        session.rescroll()
        return ActionResult(consumed=True, status="join_previous")
    return ActionResult(consumed=True, status="noop")


def delete_forward(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    """Delete under the cursor, or pull the next row up onto this one."""

    del match
    document = session.document
    row, col = session.state.cursor
    if col < document.line_length(row):
        document.delete_char(row, col)
        return ActionResult(consumed=True, status="delete_forward")
    if row < document.line_count - 1:
        document.join_with_previous(row + 1)
        return ActionResult(consumed=True, status="join_next")
    return ActionResult(consumed=True, status="noop")


__all__ = ["insert_text", "split_line", "backspace", "delete_forward"]
