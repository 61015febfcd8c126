"""Process entry point: decide what to edit, then hand off to a host."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from tedit.buffer import Document, EditorError, StorageReadFailure
from tedit.runtime import telemetry
from tedit.runtime.config import EditorSettings
from tedit.session import EditSession


class LaunchError(EditorError):
    """Raised when the command-line path cannot be used at all."""


def resolve_launch(argument: Optional[str]) -> Document:
    """Build the starting document for a command-line path.

    - existing file: open it, its directory becomes the save fallback
    - existing directory: empty document saving into that directory
    - anything else: empty document pre-named with the path, whose parent
      directory must already exist
    - no argument: empty, unnamed document
    """

    if argument is None:
        telemetry.record_event("launch.unbound")
        return Document()

    path = Path(argument)
    if path.is_file():
        document = Document.open(path)
        document.set_fallback_directory(path.parent)
        telemetry.record_event("launch.open_file", data={"path": path})
        return document

    if path.is_dir():
        telemetry.record_event("launch.directory", data={"path": path})
        return Document(fallback_directory=path)

    parent = path.parent
    if not parent.is_dir():
        raise LaunchError(f"Parent directory does not exist: {parent}")
    telemetry.record_event("launch.new_file", data={"path": path})
    return Document(location=path, fallback_directory=parent)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tedit", description="Minimal screen-oriented text editor."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File to open or create, or a directory to save new files into",
    )
    parser.add_argument(
        "--ui",
        choices=("terminal", "textual"),
        default="terminal",
        help="Screen host to run (default: terminal)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Telemetry preset; defaults come from TEDIT_* variables",
    )
    parser.add_argument(
        "--escape-timeout",
        type=float,
        default=None,
        help="Seconds to wait for the rest of an escape sequence",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    settings = EditorSettings.from_env().with_overrides(
        escape_timeout=args.escape_timeout
    )

    try:
        document = resolve_launch(args.path)
    except LaunchError as exc:
        print(f"tedit: {exc}", file=sys.stderr)
        return 1
    except StorageReadFailure as exc:
        document = _empty_in_place_of(Path(args.path), exc)

    _run_host(args.ui, document, settings)
    return 0


def _empty_in_place_of(path: Path, exc: StorageReadFailure) -> Document:
    """Start blank but keep the unreadable path as the save target."""

    print(f"tedit: error opening file '{path}': {exc}", file=sys.stderr)
    print("tedit: starting with empty buffer instead", file=sys.stderr)
    telemetry.record_event(
        "launch.read_failed", level="warning", data={"path": path, "error": exc}
    )
    return Document(location=path, fallback_directory=path.parent)


def _run_host(ui: str, document: Document, settings: EditorSettings) -> None:
    if ui == "textual":
        from tedit.adapters.textual.app import run_textual

        run_textual(document, settings=settings)
        return

    from tedit.terminal import build_viewport, run_session
    from tedit.terminal.posix import PosixTerminal

    host = PosixTerminal()
    session = EditSession(
        document, viewport=build_viewport(host, settings), settings=settings
    )
    run_session(session, host)


__all__ = ["LaunchError", "resolve_launch", "main"]
