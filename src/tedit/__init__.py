"""Minimal screen-oriented text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "input",
    "keymaps",
    "runtime",
    "session",
    "terminal",
]

__version__ = "0.1.0"
