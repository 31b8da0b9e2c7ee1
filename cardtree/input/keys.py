"""Key tokens for tree keyboard navigation.

Terminal tokens and DOM key codes both normalize to the same names.
"""

from __future__ import annotations

KEY_LEFT = "LEFT"
KEY_UP = "UP"
KEY_RIGHT = "RIGHT"
KEY_DOWN = "DOWN"
KEY_ENTER = "ENTER"
KEY_SPACE = "SPACE"

KEY_CODES: dict[int, str] = {
    13: KEY_ENTER,
    32: KEY_SPACE,
    37: KEY_LEFT,
    38: KEY_UP,
    39: KEY_RIGHT,
    40: KEY_DOWN,
}

_ALIASES: dict[str, str] = {
    "ENTER_CR": KEY_ENTER,
    "ENTER_LF": KEY_ENTER,
    "ARROWLEFT": KEY_LEFT,
    "ARROWUP": KEY_UP,
    "ARROWRIGHT": KEY_RIGHT,
    "ARROWDOWN": KEY_DOWN,
}


def normalize_key(key: str | int) -> str:
    """Map a key code or key name to its canonical token."""
    if isinstance(key, int):
        return KEY_CODES.get(key, str(key))
    if key == " ":
        return KEY_SPACE
    token = key.strip().upper()
    return _ALIASES.get(token, token)


__all__ = [
    "KEY_LEFT",
    "KEY_UP",
    "KEY_RIGHT",
    "KEY_DOWN",
    "KEY_ENTER",
    "KEY_SPACE",
    "KEY_CODES",
    "normalize_key",
]
