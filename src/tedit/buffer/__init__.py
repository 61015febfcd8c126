"""Document storage, cursor state and the errors they raise."""

from .document import Document, NO_NAME
from .errors import (
    CursorRangeError,
    EditorError,
    NoTargetLocation,
    StorageReadFailure,
    StorageWriteFailure,
)
from .state import Cursor, SessionState, Viewport
from .validation import clamp_column, ensure_cursor

__all__ = [
    "Document",
    "NO_NAME",
    "Cursor",
    "SessionState",
    "Viewport",
    "EditorError",
    "NoTargetLocation",
    "StorageReadFailure",
    "StorageWriteFailure",
    "CursorRangeError",
    "clamp_column",
    "ensure_cursor",
]
