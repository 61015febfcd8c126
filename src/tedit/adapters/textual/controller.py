"""Textual-facing adapter that feeds widget key events into a session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from tedit.actions.result import ActionResult
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
    KeyInput,
)
from tedit.session import EditSession, SessionSnapshot


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


NAMED_KEYS: Dict[str, str] = {
    "enter": ENTER,
    "return": ENTER,
    "backspace": BACKSPACE,
    "delete": DELETE,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "home": HOME,
    "end": END,
    "escape": ESC,
}

SESSION_EVENTS = (
    "document.saved",
    "document.save_failed",
    "prompt.start",
    "prompt.end",
    "session.quit",
)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[SessionSnapshot], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_key(key: str, character: Optional[str] = None) -> KeyInput:
    """Translate a Textual key name into the session's key vocabulary."""

    name = key.lower()
    if name in NAMED_KEYS:
        return KeyInput(NAMED_KEYS[name])
    if name.startswith("ctrl+") and len(name) == len("ctrl+") + 1:
        return KeyInput.ctrl(name[-1])
    if character and len(character) == 1 and character.isprintable():
        return KeyInput.char(character)
    return KeyInput(UNKNOWN)


class TextualEditorAdapter:
    """Bridges an ``EditSession`` and its bus to a Textual-friendly surface."""

    def __init__(self, session: EditSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> ActionResult:
        event = normalize_key(key, character)
        self._log_state("key ->", key=key, token=event.token)
        result = self.session.handle_key(event)
        self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in SESSION_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh(self) -> None:
        snapshot = self.session.snapshot()
        self.hooks.update_view(snapshot)
        self.hooks.update_status(snapshot.status.left)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "cursor": session.cursor,
            "scroll": session.scroll_offset,
            "prompt": session.prompt is not None,
            "version": session.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_key"]
