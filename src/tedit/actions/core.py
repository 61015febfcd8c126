"""Session-level actions that do not touch the text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .result import ActionResult

if TYPE_CHECKING:
    from tedit.keymaps.resolver import ResolutionMatch
    from tedit.session import EditSession


def quit_session(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    # No implicit save; unsaved changes are dropped.
    del match
    session.stop()
    return ActionResult(consumed=True, status="quit")


__all__ = ["quit_session"]
