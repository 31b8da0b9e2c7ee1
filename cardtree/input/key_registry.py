"""Key-combo dispatch table for per-node keyboard actions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

TargetT = TypeVar("TargetT")


@dataclass(frozen=True)
class KeyComboBinding(Generic[TargetT]):
    """One or more keys (tokens or DOM key codes) bound to an action on a target."""

    combos: tuple[str | int, ...]
    handler: Callable[[TargetT], object]


class KeyComboRegistry(Generic[TargetT]):
    """Maps normalized key tokens to handlers that act on the key's target.

    The target is whatever the key was pressed on, typically a node path.
    Handlers return a truthy value when the key changed something.
    """

    def __init__(self, normalize: Callable[[str | int], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else str
        self._handlers: dict[str, Callable[[TargetT], object]] = {}

    def register_bindings(self, *bindings: KeyComboBinding[TargetT]) -> KeyComboRegistry[TargetT]:
        """Register bindings in order; a later combo replaces an earlier one."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[self._normalize(combo)] = binding.handler
        return self

    def is_bound(self, key: str | int) -> bool:
        return self._normalize(key) in self._handlers

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, key: str | int, target: TargetT) -> bool | None:
        """Run the handler for ``key`` on ``target``.

        Returns ``None`` when the key is unbound, otherwise whether the
        handler reported a change.
        """
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return bool(handler(target))
