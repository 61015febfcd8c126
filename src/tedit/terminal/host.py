"""Capability interface every terminal backend provides."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple


class TerminalHost(Protocol):
    """The only terminal surface the editor depends on."""

    def enter_raw_mode(self) -> None:
        ...

    def restore_mode(self) -> None:
        ...

    def get_dimensions(self) -> Optional[Tuple[int, int]]:
        """Return ``(rows, cols)`` or ``None`` when the size is unknown."""
        ...

    def write(self, data: str) -> None:
        ...

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        """Block for one byte; ``None`` on timeout or end of input."""
        ...


__all__ = ["TerminalHost"]
