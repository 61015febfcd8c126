"""Built-in key table seeding every new session."""

from __future__ import annotations

from typing import Iterable, Sequence

from tedit.actions import core as core_actions
from tedit.actions import editing as editing_actions
from tedit.actions import file as file_actions
from tedit.actions import motion as motion_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="session.quit",
        handler=core_actions.quit_session,
        description="Quit without saving",
    ),
    ActionRef(
        id="edit.split_line",
        handler=editing_actions.split_line,
        description="Break the line at the cursor",
    ),
    ActionRef(
        id="edit.backspace",
        handler=editing_actions.backspace,
        description="Delete before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=editing_actions.delete_forward,
        description="Delete under the cursor",
    ),
    ActionRef(
        id="cursor.up", handler=motion_actions.move_up, description="Move up"
    ),
    ActionRef(
        id="cursor.down", handler=motion_actions.move_down, description="Move down"
    ),
    ActionRef(
        id="cursor.left", handler=motion_actions.move_left, description="Move left"
    ),
    ActionRef(
        id="cursor.right",
        handler=motion_actions.move_right,
        description="Move right",
    ),
    ActionRef(
        id="cursor.home",
        handler=motion_actions.move_home,
        description="Jump to line start",
    ),
    ActionRef(
        id="cursor.end",
        handler=motion_actions.move_end,
        description="Jump to line end",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Save the document",
    ),
    ActionRef(
        id="file.save_as",
        handler=file_actions.save_as,
        description="Save under a new name",
    ),
)


def _binding(binding_id: str, token: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=binding_id,
        stroke=KeyStroke.parse(token),
        action_id=action_id,
        description=description,
        source="defaults",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _binding("quit", "ctrl+q", "session.quit", "Quit"),
    _binding("save", "ctrl+s", "file.save", "Save"),
    _binding("save_as", "ctrl+a", "file.save_as", "Save as"),
    _binding("enter", "ENTER", "edit.split_line", "New line"),
    _binding("backspace", "BACKSPACE", "edit.backspace", "Backspace"),
    _binding("delete", "DELETE", "edit.delete_forward", "Delete"),
    _binding("up", "UP", "cursor.up", "Cursor up"),
    _binding("down", "DOWN", "cursor.down", "Cursor down"),
    _binding("left", "LEFT", "cursor.left", "Cursor left"),
    _binding("right", "RIGHT", "cursor.right", "Cursor right"),
    _binding("home", "HOME", "cursor.home", "Line start"),
    _binding("end", "END", "cursor.end", "Line end"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings."""

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
