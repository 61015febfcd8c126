"""Token lookup over the registry, cached per registry revision."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from tedit.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Maps key tokens to the winning binding."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Optional[tuple[int, Dict[str, Binding]]] = None

    def resolve(self, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": token},
        ) as handle:
            binding = self._ensure_index().get(token)
            if binding is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            action = self._registry.get_action(binding.action_id)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(
                status="match",
                match=ResolutionMatch(binding=binding, action=action),
            )

    def _ensure_index(self) -> Dict[str, Binding]:
        revision = self._registry.revision()
        if self._cache and self._cache[0] == revision:
            return self._cache[1]

        index: Dict[str, Binding] = {}
        for binding in self._registry.iter_bindings():
            current = index.get(binding.token)
            if current and (-current.priority, current.id) <= (
                -binding.priority,
                binding.id,
            ):
                continue
            index[binding.token] = binding
        self._cache = (revision, index)
        return index


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
