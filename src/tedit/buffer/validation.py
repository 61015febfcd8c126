"""Validation helpers shared by the session and its hosts."""

from __future__ import annotations

from .document import Document
from .errors import CursorRangeError
from .state import Cursor


def ensure_cursor(document: Document, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise CursorRangeError("Row out of range", cursor=cursor)
    if col < 0 or col > document.line_length(row):
        raise CursorRangeError("Column out of range", cursor=cursor)
    return cursor


def clamp_column(document: Document, row: int, col: int) -> int:
    return min(col, document.line_length(row))
