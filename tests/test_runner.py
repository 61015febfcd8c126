from typing import List, Optional, Tuple

import pytest

from tedit.buffer import Document, Viewport
from tedit.runtime.config import EditorSettings
from tedit.session import EditSession
from tedit.terminal import build_viewport, run_session


class FakeTerminal:
    """In-memory terminal host replaying scripted input bytes."""

    def __init__(
        self, data: bytes = b"", *, dimensions: Optional[Tuple[int, int]] = (24, 80)
    ) -> None:
        self._input = list(data)
        self._dimensions = dimensions
        self.frames: List[str] = []
        self.calls: List[str] = []

    def enter_raw_mode(self) -> None:
        self.calls.append("raw")

    def restore_mode(self) -> None:
        self.calls.append("restore")

    def get_dimensions(self) -> Optional[Tuple[int, int]]:
        return self._dimensions

    def write(self, data: str) -> None:
        self.frames.append(data)

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        if not self._input:
            return None
        return self._input.pop(0)


class ExplodingSession(EditSession):
    def handle_key(self, key):  # type: ignore[override]
        raise RuntimeError("boom")


def make_session(document: Document | None = None) -> EditSession:
    return EditSession(document, viewport=Viewport(height=5, width=20))


def test_build_viewport_reserves_bars_and_gutter() -> None:
    viewport = build_viewport(FakeTerminal(dimensions=(30, 100)), EditorSettings())

    assert viewport == Viewport(height=28, width=95)


def test_build_viewport_falls_back_when_size_unknown() -> None:
    viewport = build_viewport(FakeTerminal(dimensions=None), EditorSettings())

    assert viewport == Viewport(height=22, width=75)


def test_run_session_types_and_quits() -> None:
    host = FakeTerminal(b"hi\r\x1b[Ayo\x11ignored")
    session = make_session()

    run_session(session, host)

    assert session.document.snapshot() == ("yohi", "")
    assert session.running is False
    assert host.calls == ["raw", "restore"]
    assert host.frames[-1].startswith("\x1b[2J")


def test_run_session_stops_when_input_closes() -> None:
    host = FakeTerminal(b"abc")
    session = make_session()

    run_session(session, host)

    assert session.document.snapshot() == ("abc",)
    assert session.running is True
    assert host.calls == ["raw", "restore"]


def test_run_session_restores_mode_on_error() -> None:
    host = FakeTerminal(b"x")
    session = ExplodingSession(viewport=Viewport(height=5, width=20))

    with pytest.raises(RuntimeError, match="boom"):
        run_session(session, host)

    assert host.calls == ["raw", "restore"]
