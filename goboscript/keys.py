"""Names of the keys a script can wait for."""

from __future__ import annotations

from collections.abc import Iterator

KEYS = (
    *"abcdefghijklmnopqrstuvwxyz",
    *"0123456789",
    "space",
    "up arrow",
    "down arrow",
    "right arrow",
    "left arrow",
    "enter",
    "any",
    "backspace",
    "delete",
    "shift",
    "caps lock",
    "scroll lock",
    "control",
    "escape",
    "insert",
    "home",
    "end",
    "page up",
    "page down",
)

KEY_CHARS = "-,.`=[]\\;'/!@#$%^&*()_+{}|:\"?<>~"

_KEY_SET = frozenset(KEYS)


def all_keys() -> Iterator[str]:
    """Yield every accepted key name.

    The punctuation keys are bracketed by an empty name on each side, so the
    empty string is accepted as a key as well.
    """
    yield from KEYS
    yield ""
    yield from KEY_CHARS
    yield ""


def is_key(s: str) -> bool:
    """Return whether ``s`` names a key."""
    return s in _KEY_SET or s == "" or (len(s) == 1 and s in KEY_CHARS)