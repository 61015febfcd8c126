"""Error types raised by the document layer and its callers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .state import Cursor


class EditorError(RuntimeError):
    """Base class for every error the editor raises on purpose."""


class NoTargetLocation(EditorError):
    """Raised when a save is requested before any location is known."""

    def __init__(self, message: str = "No filename") -> None:
        super().__init__(message)


class StorageReadFailure(EditorError):
    """Raised when a document cannot be loaded from disk."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class StorageWriteFailure(EditorError):
    """Raised when persisting a document fails; memory stays authoritative."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class CursorRangeError(EditorError):
    """Raised when a host places the cursor outside the document."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


__all__ = [
    "EditorError",
    "NoTargetLocation",
    "StorageReadFailure",
    "StorageWriteFailure",
    "CursorRangeError",
]
