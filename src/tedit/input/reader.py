"""Blocking key reader that feeds raw bytes through ``decode_key``."""

from __future__ import annotations

from typing import Optional, Protocol

from .decoder import decode_key
from .events import KeyInput


class ByteSource(Protocol):
    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        """Return the next byte, or ``None`` on timeout / end of input."""
        ...


class KeyReader:
    """Assembles complete key events from a byte source.

    An escape byte is held back until either the rest of a known sequence
    arrives or ``escape_timeout`` passes without more input, at which point
    whatever is buffered is decoded as final.
    """

    def __init__(self, source: ByteSource, *, escape_timeout: float = 0.05) -> None:
        self._source = source
        self._escape_timeout = escape_timeout
        self._pending = bytearray()

    def read_key(self) -> Optional[KeyInput]:
        while True:
            if not self._pending:
                byte = self._source.read_byte(None)
                if byte is None:
                    return None
                self._pending.append(byte)

            key, used = decode_key(bytes(self._pending))
            if key is None:
                follow = self._source.read_byte(self._escape_timeout)
                if follow is not None:
                    self._pending.append(follow)
                    continue
                key, used = decode_key(bytes(self._pending), final=True)

            del self._pending[:used]
            if key is not None:
                return key


__all__ = ["ByteSource", "KeyReader"]
