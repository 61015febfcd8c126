"""termios-backed terminal host for POSIX systems."""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from typing import Any, List, Optional, Tuple

from tedit.runtime import telemetry


class PosixTerminal:
    def __init__(self, *, stdin_fd: Optional[int] = None, stdout: Any = None) -> None:
        self._stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self._stdout = sys.stdout if stdout is None else stdout
        self._saved: Optional[List[Any]] = None

    def enter_raw_mode(self) -> None:
        if self._saved is not None:
            return
        self._saved = termios.tcgetattr(self._stdin_fd)
        tty.setraw(self._stdin_fd)
        telemetry.record_event("terminal.raw_mode", level="debug")

    def restore_mode(self) -> None:
        if self._saved is None:
            return
        termios.tcsetattr(self._stdin_fd, termios.TCSAFLUSH, self._saved)
        self._saved = None
        telemetry.record_event("terminal.restored", level="debug")

    def get_dimensions(self) -> Optional[Tuple[int, int]]:
        try:
            size = os.get_terminal_size(self._stdout.fileno())
        except (OSError, ValueError):
            return None
        if not size.lines or not size.columns:
            return None
        return size.lines, size.columns

    def write(self, data: str) -> None:
        self._stdout.write(data)
        self._stdout.flush()

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        if timeout is not None:
            ready, _, _ = select.select([self._stdin_fd], [], [], timeout)
            if not ready:
                return None
        data = os.read(self._stdin_fd, 1)
        if not data:
            return None
        return data[0]


__all__ = ["PosixTerminal"]
