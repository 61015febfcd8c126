"""Editor settings resolved from ``TEDIT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "TEDIT_"

HELP_MESSAGE = "HELP: Ctrl-Q = quit | Ctrl-S = save | Ctrl-A = save as"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Static knobs shared by the session and its hosts."""

    help_message: str = HELP_MESSAGE
    fallback_rows: int = 24
    fallback_cols: int = 80
    # status bar + message bar
    reserved_rows: int = 2
    gutter_width: int = 5
    escape_timeout: float = 0.05

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        source = os.environ if env is None else env
        defaults = cls()
        return cls(
            help_message=source.get(f"{ENV_PREFIX}HELP", defaults.help_message),
            fallback_rows=_env_int(source, "ROWS", defaults.fallback_rows),
            fallback_cols=_env_int(source, "COLS", defaults.fallback_cols),
            reserved_rows=defaults.reserved_rows,
            gutter_width=max(
                1, _env_int(source, "GUTTER", defaults.gutter_width)
            ),
            escape_timeout=_env_float(
                source, "ESCAPE_TIMEOUT", defaults.escape_timeout
            ),
        )

    def with_overrides(self, **changes: object) -> "EditorSettings":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def viewport_for(self, rows: int, cols: int) -> tuple[int, int]:
        """Return ``(height, width)`` left for text once bars are reserved."""

        height = max(1, rows - self.reserved_rows)
        width = max(1, cols - self.gutter_width)
        return height, width


__all__ = ["EditorSettings", "HELP_MESSAGE"]
