from typing import List, Optional

from tedit.input import KeyInput, KeyReader, decode_key, iter_keys
from tedit.input.decoder import decode_byte
from tedit.input.events import (
    BACKSPACE,
    DELETE,
    DOWN,
    END,
    ENTER,
    ESC,
    HOME,
    LEFT,
    RIGHT,
    UNKNOWN,
    UP,
)


class ScriptedSource:
    """Byte source replaying a fixed script; ``None`` entries act as pauses."""

    def __init__(self, script: List[Optional[int]]) -> None:
        self._script = list(script)
        self.timeouts: List[Optional[float]] = []

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        self.timeouts.append(timeout)
        if not self._script:
            return None
        return self._script.pop(0)


def keys_of(data: bytes) -> List[str]:
    return [key.token for key in iter_keys(data)]


def test_decode_byte_control_keys() -> None:
    assert decode_byte(13).key == ENTER
    assert decode_byte(10).key == ENTER
    assert decode_byte(127).key == BACKSPACE
    assert decode_byte(8).key == BACKSPACE
    assert decode_byte(17) == KeyInput.ctrl("q")
    assert decode_byte(19).token == "ctrl+s"
    assert decode_byte(1).token == "ctrl+a"
    assert decode_byte(0).key == UNKNOWN


def test_decode_byte_printable() -> None:
    key = decode_byte(ord("a"))

    assert key.text == "a"
    assert key.is_printable


def test_decode_escape_sequences() -> None:
    assert keys_of(b"\x1b[A\x1b[B\x1b[C\x1b[D") == [UP, DOWN, RIGHT, LEFT]
    assert keys_of(b"\x1b[H\x1b[F\x1b[3~") == [HOME, END, DELETE]
    assert keys_of(b"\x1bOH\x1b[4~\x1b[1~") == [HOME, END, HOME]


def test_decode_reports_consumed_bytes() -> None:
    assert decode_key(b"\x1b[3~x") == (KeyInput(DELETE), 4)
    assert decode_key(b"ab", 1) == (KeyInput.char("b"), 1)


def test_incomplete_sequence_waits_for_more_input() -> None:
    assert decode_key(b"\x1b") == (None, 0)
    assert decode_key(b"\x1b[") == (None, 0)
    assert decode_key(b"\x1b[3") == (None, 0)


def test_lone_escape_when_final() -> None:
    assert decode_key(b"\x1b", final=True) == (KeyInput(ESC), 1)


def test_escape_followed_by_plain_byte() -> None:
    assert decode_key(b"\x1bx") == (KeyInput(ESC), 1)
    assert keys_of(b"\x1bx") == [ESC, "x"]


def test_unknown_csi_is_swallowed_whole() -> None:
    assert decode_key(b"\x1b[15~a") == (KeyInput(UNKNOWN), 5)
    assert keys_of(b"\x1b[1;5Cz") == [UNKNOWN, "z"]


def test_reader_assembles_split_sequence() -> None:
    source = ScriptedSource([0x1B, ord("["), ord("A"), ord("q")])
    reader = KeyReader(source, escape_timeout=0.01)

    assert reader.read_key() == KeyInput(UP)
    assert reader.read_key() == KeyInput.char("q")
    assert reader.read_key() is None


def test_reader_times_out_to_escape() -> None:
    source = ScriptedSource([0x1B])
    reader = KeyReader(source, escape_timeout=0.01)

    assert reader.read_key() == KeyInput(ESC)
    assert 0.01 in source.timeouts


def test_reader_keeps_bytes_after_escape() -> None:
    source = ScriptedSource([0x1B, ord("x")])
    reader = KeyReader(source, escape_timeout=0.01)

    assert reader.read_key() == KeyInput(ESC)
    assert reader.read_key() == KeyInput.char("x")
