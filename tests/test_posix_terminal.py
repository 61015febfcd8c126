import io
import os
import struct
from typing import Iterator, Tuple

import pytest

termios = pytest.importorskip("termios")
fcntl = pytest.importorskip("fcntl")

from tedit.input import KeyInput, KeyReader  # noqa: E402
from tedit.input.events import UP  # noqa: E402
from tedit.terminal.posix import PosixTerminal  # noqa: E402


@pytest.fixture
def pty_pair() -> Iterator[Tuple[int, int]]:
    master, slave = os.openpty()
    try:
        yield master, slave
    finally:
        os.close(master)
        os.close(slave)


def make_terminal(slave: int) -> PosixTerminal:
    return PosixTerminal(stdin_fd=slave, stdout=io.StringIO())


def set_window_size(fd: int, rows: int, cols: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


def test_read_byte_returns_written_byte(pty_pair: Tuple[int, int]) -> None:
    master, slave = pty_pair
    terminal = make_terminal(slave)
    terminal.enter_raw_mode()

    os.write(master, b"q")

    assert terminal.read_byte(1.0) == ord("q")
    terminal.restore_mode()


def test_read_byte_times_out_without_input(pty_pair: Tuple[int, int]) -> None:
    _, slave = pty_pair
    terminal = make_terminal(slave)
    terminal.enter_raw_mode()

    assert terminal.read_byte(0.01) is None
    terminal.restore_mode()


def test_key_reader_decodes_from_terminal(pty_pair: Tuple[int, int]) -> None:
    master, slave = pty_pair
    terminal = make_terminal(slave)
    terminal.enter_raw_mode()
    os.write(master, b"\x1b[Ax")

    reader = KeyReader(terminal, escape_timeout=0.5)

    assert reader.read_key() == KeyInput(UP)
    assert reader.read_key() == KeyInput.char("x")
    terminal.restore_mode()


def test_read_byte_at_end_of_input() -> None:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"a")
        os.close(write_fd)
        terminal = PosixTerminal(stdin_fd=read_fd, stdout=io.StringIO())

        assert terminal.read_byte() == ord("a")
        assert terminal.read_byte() is None
        assert terminal.read_byte(0.01) is None
    finally:
        os.close(read_fd)


def test_raw_mode_round_trip_restores_attributes(pty_pair: Tuple[int, int]) -> None:
    _, slave = pty_pair
    original = termios.tcgetattr(slave)
    terminal = make_terminal(slave)

    terminal.enter_raw_mode()
    raw = termios.tcgetattr(slave)
    terminal.enter_raw_mode()
    terminal.restore_mode()
    terminal.restore_mode()

    assert raw != original
    assert termios.tcgetattr(slave) == original


def test_restore_without_enter_is_noop(pty_pair: Tuple[int, int]) -> None:
    _, slave = pty_pair
    original = termios.tcgetattr(slave)

    make_terminal(slave).restore_mode()

    assert termios.tcgetattr(slave) == original


def test_get_dimensions_reads_window_size(pty_pair: Tuple[int, int]) -> None:
    _, slave = pty_pair
    set_window_size(slave, 30, 100)
    stdout = io.open(slave, "w", closefd=False)
    try:
        assert PosixTerminal(stdin_fd=slave, stdout=stdout).get_dimensions() == (
            30,
            100,
        )
    finally:
        stdout.close()


def test_get_dimensions_unknown_for_zero_size(pty_pair: Tuple[int, int]) -> None:
    _, slave = pty_pair
    set_window_size(slave, 0, 0)
    stdout = io.open(slave, "w", closefd=False)
    try:
        assert PosixTerminal(stdin_fd=slave, stdout=stdout).get_dimensions() is None
    finally:
        stdout.close()


def test_get_dimensions_unknown_without_terminal() -> None:
    terminal = PosixTerminal(stdin_fd=0, stdout=io.StringIO())

    assert terminal.get_dimensions() is None


def test_write_flushes_to_stdout() -> None:
    stdout = io.StringIO()
    terminal = PosixTerminal(stdin_fd=0, stdout=stdout)

    terminal.write("\x1b[H")

    assert stdout.getvalue() == "\x1b[H"
