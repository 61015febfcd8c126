"""Logical key events handed to the session one at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
DELETE = "DELETE"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
HOME = "HOME"
END = "END"
ESC = "ESC"
UNKNOWN = "UNKNOWN"


def _normalize_modifiers(modifiers: Tuple[str, ...]) -> Tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event.

    ``key`` is either a named key (``"ENTER"``, ``"UP"``...) or the character
    itself; ``text`` is set only for keys that produce a character.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        return cls(key=ch, text=ch)

    @classmethod
    def ctrl(cls, letter: str) -> "KeyInput":
        return cls(key=letter.lower(), modifiers=("ctrl",))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def is_printable(self) -> bool:
        text = self.text
        if text is None or len(text) != 1 or self.modifiers:
            return False
        return text.isprintable() and ord(text) < 256


__all__ = [
    "KeyInput",
    "ENTER",
    "BACKSPACE",
    "DELETE",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "HOME",
    "END",
    "ESC",
    "UNKNOWN",
]
