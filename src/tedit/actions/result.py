"""Result type returned by every action and by ``EditSession.handle_key``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class ActionResult:
    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
