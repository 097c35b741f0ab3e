"""
Keystroke helpers for keyboard-wedge scanners.

In keyboard-emulation mode GS1 scanners emit FNC1 as ASCII 29 (Group
Separator), which has no printable form. Input widgets show it as "*".
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple


GROUP_SEPARATOR_CODE = 29
GROUP_SEPARATOR_DISPLAY = "*"


class KeyEvent(NamedTuple):
    char_code: int
    key: str


def check_invisible_chars(event: Any) -> str:
    """
    Return the display character for a key event.

    Accepts a KeyEvent, any object with ``char_code`` and ``key`` attributes,
    or a browser-style mapping with ``charCode`` and ``key``.
    """
    if isinstance(event, Mapping):
        char_code = event.get("charCode", event.get("char_code"))
        key = event.get("key", "")
    else:
        char_code = event.char_code
        key = event.key

    if char_code == GROUP_SEPARATOR_CODE:
        return GROUP_SEPARATOR_DISPLAY
    return key
