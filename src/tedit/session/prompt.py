"""Filename prompt fed one key at a time while a save waits for a name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from tedit.input.events import BACKSPACE, ENTER, ESC, KeyInput


@dataclass(frozen=True, slots=True)
class PromptOutcome:
    status: Literal["editing", "submit", "cancel", "ignored"]
    value: Optional[str] = None

    @property
    def finished(self) -> bool:
        return self.status in ("submit", "cancel")


class FilenamePrompt:
    """Accumulates a name; owns no document state.

    Enter only commits a non-empty name, Escape cancels with no name.
    """

    def __init__(self, label: str = "Save as: ") -> None:
        self.label = label
        self._typed: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self._typed)

    @property
    def display(self) -> str:
        return f"{self.label}{self.text}"

    def feed(self, key: KeyInput) -> PromptOutcome:
        if key.key == ESC:
            return PromptOutcome("cancel")
        if key.key == ENTER:
            if not self._typed:
                return PromptOutcome("ignored")
            return PromptOutcome("submit", self.text)
        if key.key == BACKSPACE:
            if self._typed:
                self._typed.pop()
            return PromptOutcome("editing")
        if key.is_printable and key.text is not None:
            self._typed.append(key.text)
            return PromptOutcome("editing")
        return PromptOutcome("ignored")


__all__ = ["FilenamePrompt", "PromptOutcome"]
