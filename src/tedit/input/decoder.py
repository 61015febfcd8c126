"""Pure decoding of raw terminal bytes into logical key events.

``decode_key`` never blocks: it looks at the bytes it is given and reports
either a decoded event plus the number of bytes it used, or ``(None, 0)``
when the bytes are a strict prefix of an escape sequence and more input is
needed. Passing ``final=True`` forces a decision on whatever is available.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .events import (
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
    KeyInput,
)

ESCAPE = 0x1B

ESCAPE_SEQUENCES: Mapping[bytes, str] = {
    b"\x1b[A": UP,
    b"\x1b[B": DOWN,
    b"\x1b[C": RIGHT,
    b"\x1b[D": LEFT,
    b"\x1bOA": UP,
    b"\x1bOB": DOWN,
    b"\x1bOC": RIGHT,
    b"\x1bOD": LEFT,
    b"\x1b[H": HOME,
    b"\x1b[F": END,
    b"\x1bOH": HOME,
    b"\x1bOF": END,
    b"\x1b[1~": HOME,
    b"\x1b[7~": HOME,
    b"\x1b[4~": END,
    b"\x1b[8~": END,
    b"\x1b[3~": DELETE,
}


@dataclass(slots=True)
class ByteTrieNode:
    """Trie node keyed by byte value; leaves carry the decoded key name."""

    key: Optional[str] = None
    children: Dict[int, "ByteTrieNode"] = field(default_factory=dict)

    def child(self, value: int) -> "ByteTrieNode":
        return self.children.setdefault(value, ByteTrieNode())


def build_trie(sequences: Mapping[bytes, str]) -> ByteTrieNode:
    root = ByteTrieNode()
    for sequence, key in sequences.items():
        node = root
        for value in sequence:
            node = node.child(value)
        node.key = key
    return root


_TRIE = build_trie(ESCAPE_SEQUENCES)


def decode_byte(byte: int) -> KeyInput:
    """Decode a single non-escape byte."""

    if byte in (10, 13):
        return KeyInput(ENTER)
    if byte in (8, 127):
        return KeyInput(BACKSPACE)
    if 32 <= byte < 127:
        return KeyInput.char(chr(byte))
    if 1 <= byte <= 26:
        return KeyInput.ctrl(chr(byte + 96))
    return KeyInput(UNKNOWN)


def _scan_csi(data: bytes, start: int) -> Optional[int]:
    """Return the index of the CSI final byte at or after ``start``."""

    for index in range(start, len(data)):
        if 0x40 <= data[index] <= 0x7E:
            return index
    return None


def _decode_escape(
    data: bytes, pos: int, final: bool
) -> Tuple[Optional[KeyInput], int]:
    node = _TRIE
    index = pos
    while True:
        if node.key is not None and not node.children:
            return KeyInput(node.key), index - pos
        if index >= len(data):
            if not final:
                return None, 0
            break
        child = node.children.get(data[index])
        if child is None:
            break
        node = child
        index += 1

    consumed = index - pos
    if consumed <= 1:
        return KeyInput(ESC), 1

    if data[pos + 1] == ord("["):
        end = _scan_csi(data, pos + 2)
        if end is not None:
            return KeyInput(UNKNOWN), end - pos + 1
        if not final:
            return None, 0
        return KeyInput(UNKNOWN), len(data) - pos

    return KeyInput(UNKNOWN), consumed


def decode_key(
    data: bytes, pos: int = 0, *, final: bool = False
) -> Tuple[Optional[KeyInput], int]:
    """Decode one key event starting at ``data[pos]``."""

    if pos >= len(data):
        return None, 0
    byte = data[pos]
    if byte != ESCAPE:
        return decode_byte(byte), 1
    return _decode_escape(data, pos, final)


def iter_keys(data: bytes) -> Iterator[KeyInput]:
    """Decode a complete byte string, treating its end as final."""

    pos = 0
    while pos < len(data):
        key, used = decode_key(data, pos, final=True)
        if key is None:
            break
        yield key
        pos += used


__all__ = [
    "ESCAPE_SEQUENCES",
    "ByteTrieNode",
    "build_trie",
    "decode_byte",
    "decode_key",
    "iter_keys",
]
