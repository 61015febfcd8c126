"""Textual app hosting an edit session."""

from __future__ import annotations

from typing import Optional

try:  # pragma: no cover - imported only when the Textual host is used
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use tedit.adapters.textual.app"
    ) from exc

from tedit.buffer import Document, Viewport
from tedit.runtime.config import EditorSettings
from tedit.session import EditSession, SessionSnapshot

from .controller import TextualEditorAdapter, TextualUIHooks


def render_text(snapshot: SessionSnapshot, *, gutter_width: int) -> Text:
    """Draw visible lines with a gutter and a reverse-video cursor cell."""

    text = Text(no_wrap=True, overflow="crop")
    width = snapshot.viewport.width
    cursor_row, cursor_col = snapshot.cursor
    for screen_row in range(snapshot.viewport.height):
        if screen_row < len(snapshot.lines):
            line = snapshot.lines[screen_row]
            label, body = str(line.number), line.text[:width]
        else:
            label, body = "~", ""
        text.append(f"{label:>{gutter_width - 1}} ", style="dim")
        start = len(text)
        text.append(body)
        if screen_row == cursor_row and snapshot.prompt is None:
            if cursor_col >= len(body):
                text.append(" ")
            offset = start + min(cursor_col, width)
            text.stylize("reverse", offset, offset + 1)
        if screen_row < snapshot.viewport.height - 1:
            text.append("\n")
    return text


class EditorApp(App[None]):
    """Minimal Textual UI embedding the edit session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#message-line {
		height: 1;
	}
	"""

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        super().__init__()
        self._document = document
        self._settings = settings or EditorSettings.from_env()
        self.session: EditSession | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._text_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._text_widget = Static("", id="text-view")
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._text_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        height, width = self._settings.viewport_for(self.size.height, self.size.width)
        self.session = EditSession(
            self._document,
            viewport=Viewport(height=height, width=width),
            settings=self._settings,
        )
        hooks = TextualUIHooks(
            update_view=self._update_view,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def _update_view(self, snapshot: SessionSnapshot) -> None:
        columns = snapshot.viewport.width + self._settings.gutter_width
        if self._text_widget:
            self._text_widget.update(
                render_text(snapshot, gutter_width=self._settings.gutter_width)
            )
        if self._status_widget:
            self._status_widget.update(
                Text(snapshot.status.format(columns), style="reverse")
            )
        if self._message_widget:
            self._message_widget.update(Text(snapshot.message))

    def _handle_event(self, name: str, payload: object | None) -> None:
        if name == "session.quit":
            self.exit()

    def _log_line(self, line: str) -> None:
        self.log(line)


def run_textual(
    document: Optional[Document] = None, *, settings: Optional[EditorSettings] = None
) -> None:
    EditorApp(document, settings=settings).run()


__all__ = ["EditorApp", "render_text", "run_textual"]
