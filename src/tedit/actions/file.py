"""Save and Save-As actions."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from tedit.buffer.errors import NoTargetLocation, StorageWriteFailure
from tedit.runtime import telemetry

from .result import ActionResult

if TYPE_CHECKING:
    from tedit.keymaps.resolver import ResolutionMatch
    from tedit.session import EditSession

SAVE_PROMPT = "Save as: "


def save(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    """Write to the current location, asking for a name on first save."""

    del match
    document = session.document
    if document.location is None:
        return session.request_name(
            SAVE_PROMPT, lambda name: _save_named(session, name, save_as=False)
        )
    return _persist(session, document.persist_to_current_location, save_as=False)


def save_as(session: "EditSession", match: ResolutionMatch) -> ActionResult:
    del match
    return session.request_name(
        SAVE_PROMPT, lambda name: _save_named(session, name, save_as=True)
    )


def _save_named(
    session: "EditSession", name: Optional[str], *, save_as: bool
) -> ActionResult:
    if name is None:
        session.show_message("Save aborted")
        return ActionResult(consumed=True, status="save_aborted", message="Save aborted")
    return _persist(
        session, lambda: session.document.persist_to(name), save_as=save_as
    )


def _persist(
    session: "EditSession", write: Callable[[], Path], *, save_as: bool
) -> ActionResult:
    try:
        path = write()
    except (NoTargetLocation, StorageWriteFailure) as exc:
        message = f"Error saving file: {exc}"
        session.show_message(message)
        session.bus.emit("document.save_failed", {"error": str(exc)})
        return ActionResult(consumed=True, status="save_failed", message=message)

    session.save_count += 1
    if save_as:
        message = f"Saved as {path.name} (save #{session.save_count})"
    else:
        message = f"{path.name} saved! (save #{session.save_count})"
    session.show_message(message)
    telemetry.record_event(
        "session.saved",
        data={"path": path, "count": session.save_count, "save_as": save_as},
    )
    session.bus.emit("document.saved", {"path": path, "count": session.save_count})
    return ActionResult(consumed=True, status="saved", message=message)


__all__ = ["save", "save_as", "SAVE_PROMPT"]
