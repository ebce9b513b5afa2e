"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class KeyComboBinding(Generic[ResultT]):
    """Mapping from one or more combo tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], ResultT]


class KeyComboRegistry(Generic[ResultT]):
    """Small key-dispatch table with optional combo normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], ResultT]] = {}

    @staticmethod
    def _identity(combo: str) -> str:
        return combo

    def register_binding(self, binding: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, combo: str) -> bool:
        return self._normalize(combo) in self._handlers

    def dispatch(self, combo: str) -> ResultT | None:
        """Invoke the handler bound to ``combo``; ``None`` when unbound."""
        handler = self._handlers.get(self._normalize(combo))
        if handler is None:
            return None
        return handler()
