"""Classification of raw terminal characters into key events."""

from __future__ import annotations

from enum import Enum


class Key(Enum):
    INTERRUPT = "interrupt"
    BACKSPACE = "backspace"
    SPACE = "space"
    TAB = "tab"
    ENTER = "enter"
    CHARACTER = "character"
    IGNORED = "ignored"


_CODES = {
    3: Key.INTERRUPT,  # Ctrl+C
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
    32: Key.SPACE,
    9: Key.TAB,
    13: Key.ENTER,
    10: Key.ENTER,
}


def classify(char: str) -> Key:
    """Map a single raw character to the key it represents."""
    if len(char) != 1:
        return Key.IGNORED
    key = _CODES.get(ord(char))
    if key is not None:
        return key
    if char.isprintable():
        return Key.CHARACTER
    return Key.IGNORED
