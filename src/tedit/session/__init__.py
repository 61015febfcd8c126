"""Edit session, filename prompt and the snapshots hosts render."""

from .bus import SessionBus
from .edit_session import EditSession
from .prompt import FilenamePrompt, PromptOutcome
from .snapshot import SessionSnapshot, StatusSummary, VisibleLine

__all__ = [
    "EditSession",
    "SessionBus",
    "FilenamePrompt",
    "PromptOutcome",
    "SessionSnapshot",
    "StatusSummary",
    "VisibleLine",
]
