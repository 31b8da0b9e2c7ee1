"""Keyboard input: key tokens, normalization, and dispatch registry."""

from __future__ import annotations

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import (
    KEY_CODES,
    KEY_DOWN,
    KEY_ENTER,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    normalize_key,
)

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "KEY_CODES",
    "KEY_DOWN",
    "KEY_ENTER",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_SPACE",
    "KEY_UP",
    "normalize_key",
]
