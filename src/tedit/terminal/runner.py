"""Blocking input loop driving a session on a terminal host."""

from __future__ import annotations

from typing import Optional

from tedit.buffer import Viewport
from tedit.input.reader import KeyReader
from tedit.runtime import telemetry
from tedit.runtime.config import EditorSettings
from tedit.session import EditSession

from .host import TerminalHost
from .renderer import ScreenRenderer


def build_viewport(host: TerminalHost, settings: EditorSettings) -> Viewport:
    dimensions = host.get_dimensions()
    if dimensions is None:
        dimensions = (settings.fallback_rows, settings.fallback_cols)
    height, width = settings.viewport_for(*dimensions)
    return Viewport(height=height, width=width)


def run_session(
    session: EditSession,
    host: TerminalHost,
    *,
    renderer: Optional[ScreenRenderer] = None,
) -> None:
    """Draw, read one key, dispatch; repeat until quit or end of input.

    The terminal mode is restored on every exit path.
    """

    settings = session.settings
    renderer = renderer or ScreenRenderer(gutter_width=settings.gutter_width)
    reader = KeyReader(host, escape_timeout=settings.escape_timeout)

    host.enter_raw_mode()
    try:
        with telemetry.span("session::run", component="session"):
            while True:
                host.write(renderer.render(session.snapshot()))
                if not session.running:
                    break
                key = reader.read_key()
                if key is None:
                    telemetry.record_event("session.input_closed", level="warning")
                    break
                session.handle_key(key)
    finally:
        host.write(renderer.clear())
        host.restore_mode()


__all__ = ["build_viewport", "run_session"]
