"""Edit session: cursor, viewport and key dispatch over one document."""

from __future__ import annotations

from typing import Callable, Optional

from tedit.actions import editing
from tedit.actions.result import ActionResult
from tedit.buffer import Document, SessionState, Viewport, ensure_cursor
from tedit.input.events import KeyInput
from tedit.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    ResolutionMatch,
    load_default_keymaps,
)
from tedit.runtime import telemetry
from tedit.runtime.config import EditorSettings

from .bus import SessionBus
from .prompt import FilenamePrompt
from .snapshot import SessionSnapshot, StatusSummary, VisibleLine

NameCallback = Callable[[Optional[str]], ActionResult]


class EditSession:
    """Owns one document and turns key events into edits.

    The session keeps three things consistent after every key: the cursor
    row is a real line, the column is at most that line's length, and the
    cursor row lies inside the scrolled window.
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        viewport: Viewport,
        settings: Optional[EditorSettings] = None,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
        bus: Optional[SessionBus] = None,
    ) -> None:
        self.document = document if document is not None else Document()
        self.state = SessionState(viewport=viewport)
        self.settings = settings or EditorSettings()
        self.bus = bus or SessionBus()
        self.logger = telemetry.get_logger("tedit.session")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="tedit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="tedit.keymaps"
        )
        self.status_text = self.settings.help_message
        self.status_is_transient = False
        self.save_count = 0
        self.running = True
        self._prompt: Optional[FilenamePrompt] = None
        self._on_name: Optional[NameCallback] = None

    @property
    def cursor(self) -> tuple[int, int]:
        return self.state.cursor

    @property
    def scroll_offset(self) -> int:
        return self.state.scroll_offset

    @property
    def viewport(self) -> Viewport:
        return self.state.viewport

    @property
    def prompt(self) -> Optional[FilenamePrompt]:
        return self._prompt

    def place_cursor(self, row: int, col: int) -> None:
        ensure_cursor(self.document, (row, col))
        self.state.set_cursor(row, col)
        self.rescroll()

    def rescroll(self) -> None:
        self.state.rescroll()

    def show_message(self, text: str, *, transient: bool = True) -> None:
        self.status_text = text
        self.status_is_transient = transient

    def stop(self) -> None:
        self.running = False
        telemetry.record_event(
            "session.quit", data={"dirty": self.document.dirty}
        )
        self.bus.emit("session.quit", {"dirty": self.document.dirty})

    def request_name(self, label: str, on_name: NameCallback) -> ActionResult:
        """Open the filename prompt; ``on_name`` gets the result later."""

        self._prompt = FilenamePrompt(label)
        self._on_name = on_name
        self.bus.emit("prompt.start", label)
        return ActionResult(consumed=True, status="prompt_open")

    def handle_key(self, key: KeyInput) -> ActionResult:
        with telemetry.span(
            "session::handle_key",
            component="session",
            metadata={"key": key.token, "prompt": self._prompt is not None},
        ):
            if self._prompt is not None:
                return self._feed_prompt(self._prompt, key)
            if self.status_is_transient:
                self.show_message(self.settings.help_message, transient=False)
            return self._dispatch(key)

    def _dispatch(self, key: KeyInput) -> ActionResult:
        resolution = self.keymap_resolver.resolve(key.token)
        if resolution.status == "match" and resolution.match:
            return self._execute_match(resolution.match)
        if key.is_printable and key.text is not None:
            return editing.insert_text(self, key.text)
        self.logger.debug(f"ignored key {key.token}")
        return ActionResult(consumed=False, status="ignored")

    def _execute_match(self, match: ResolutionMatch) -> ActionResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self, match)

        if isinstance(outcome, ActionResult):
            return outcome
        return ActionResult(consumed=True)

    def _feed_prompt(self, prompt: FilenamePrompt, key: KeyInput) -> ActionResult:
        outcome = prompt.feed(key)
        if not outcome.finished:
            return ActionResult(
                consumed=outcome.status == "editing", status=f"prompt_{outcome.status}"
            )

        on_name = self._on_name
        self._prompt = None
        self._on_name = None
        self.bus.emit("prompt.end", outcome.value)
        if on_name is None:
            return ActionResult(consumed=True, status=f"prompt_{outcome.status}")
        return on_name(outcome.value)

    def snapshot(self) -> SessionSnapshot:
        document = self.document
        offset = self.state.scroll_offset
        end = min(document.line_count, offset + self.viewport.height)
        lines = tuple(
            VisibleLine(number=row + 1, text=document.get_line(row))
            for row in range(offset, end)
        )
        row, col = self.state.cursor
        status = StatusSummary(
            display_name=document.display_name,
            line_count=document.line_count,
            modified=document.dirty,
            row=row + 1,
            col=col + 1,
        )
        prompt = self._prompt.display if self._prompt is not None else None
        return SessionSnapshot(
            lines=lines,
            cursor=self.state.screen_cursor,
            status=status,
            message=prompt if prompt is not None else self.status_text,
            viewport=self.viewport,
            prompt=prompt,
        )


__all__ = ["EditSession"]
