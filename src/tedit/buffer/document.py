"""Line-oriented document storage and persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from tedit.runtime import telemetry

from .errors import NoTargetLocation, StorageReadFailure, StorageWriteFailure

PathLike = Union[str, Path]

NO_NAME = "[No Name]"

# One byte per character both ways, so any file content round-trips.
ENCODING = "latin-1"


def _split_text(text: str) -> List[str]:
    lines = text.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(slots=True)
class Document:
    """Mutable list-of-lines model holding the text being edited.

    ``_lines`` always holds at least one entry. Edits addressed outside the
    current text are ignored rather than raised; the session is expected to
    keep its cursor in range, and a stray index must never corrupt the text.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    location: Optional[Path] = None
    fallback_directory: Optional[Path] = None
    dirty: bool = False
    version: int = 0

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(_lines=_split_text(text))

    @classmethod
    def open(cls, path: PathLike) -> "Document":
        """Load ``path`` into a clean document whose location is ``path``."""

        target = Path(path)
        with telemetry.span(
            "document::open", component="document", metadata={"path": target}
        ):
            try:
                raw = target.read_bytes()
            except OSError as exc:
                telemetry.record_event(
                    "document.read_failed",
                    level="error",
                    data={"path": target, "error": exc},
                )
                raise StorageReadFailure(str(exc), path=target) from exc
        document = cls(_lines=_split_text(raw.decode(ENCODING)), location=target)
        telemetry.record_event(
            "document.opened",
            data={"path": target, "lines": document.line_count},
        )
        return document

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, row: int) -> int:
        if 0 <= row < len(self._lines):
            return len(self._lines[row])
        return 0

    @property
    def display_name(self) -> str:
        if self.location is None or not self.location.name:
            return NO_NAME
        return self.location.name

    def set_location(self, path: PathLike) -> None:
        self.location = Path(path)

    def set_fallback_directory(self, directory: PathLike) -> None:
        self.fallback_directory = Path(directory)

    def _touch(self) -> None:
        self.dirty = True
        self.version += 1

    def _valid_row(self, row: int) -> bool:
        return 0 <= row < len(self._lines)

    def insert_char(self, row: int, col: int, ch: str) -> None:
        if not self._valid_row(row):
            return
        line = self._lines[row]
        if not 0 <= col <= len(line):
            return
        self._lines[row] = line[:col] + ch + line[col:]
        self._touch()

    def delete_char(self, row: int, col: int) -> None:
        if not self._valid_row(row):
            return
        line = self._lines[row]
        if not 0 <= col < len(line):
            return
        self._lines[row] = line[:col] + line[col + 1 :]
        self._touch()

    def split_line(self, row: int, col: int) -> None:
        """Break ``row`` at ``col``; the tail becomes the next line."""

        if not self._valid_row(row):
            return
        line = self._lines[row]
        col = max(0, min(col, len(line)))
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self._touch()

    def join_with_previous(self, row: int) -> None:
        """Append ``row`` onto the line above it and drop ``row``."""

        if not 0 < row < len(self._lines):
            return
        current = self._lines.pop(row)
        self._lines[row - 1] += current
        self._touch()

    def persist_to_current_location(self) -> Path:
        if self.location is None:
            raise NoTargetLocation()

        target = self.location
        with telemetry.span(
            "document::persist",
            component="document",
            metadata={"path": target, "lines": self.line_count},
        ):
            try:
                target.write_bytes(self.text.encode(ENCODING))
            except (OSError, UnicodeEncodeError) as exc:
                telemetry.record_event(
                    "document.write_failed",
                    level="error",
                    data={"path": target, "error": exc},
                )
                raise StorageWriteFailure(str(exc), path=target) from exc

        self.dirty = False
        telemetry.record_event("document.saved", data={"path": target})
        return target

    def persist_to(self, name_or_path: PathLike) -> Path:
        """Adopt a new location and save there.

        A bare name given to a document that has a fallback directory but no
        location yet is resolved inside that directory.
        """

        path = Path(name_or_path)
        if self.location is None and self.fallback_directory is not None:
            path = self.fallback_directory / path
        self.location = path
        return self.persist_to_current_location()


__all__ = ["Document", "NO_NAME", "ENCODING"]
