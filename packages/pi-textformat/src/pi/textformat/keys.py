"""Key identifiers for hotkeys.

A hotkey is identified by the upper-case letter or digit it is bound to
(``"F"``, ``"3"``). ``Key.unknown`` stands for "no hotkey".
"""

from __future__ import annotations

import unicodedata

KeyId = str


class Key:
    """Named key constants."""

    unknown = "unknown"


def is_letter_or_digit(char: str) -> bool:
    """Return ``True`` for a letter (``L*``) or decimal digit (``Nd``).

    Unlike ``str.isalnum`` this rejects other numerics such as fractions,
    superscripts and Roman numerals.
    """
    if len(char) != 1:
        return False
    category = unicodedata.category(char)
    return category[0] == "L" or category == "Nd"


def is_upper_case_letter(char: str) -> bool:
    """Return ``True`` for an upper-case letter (``Lu``)."""
    return len(char) == 1 and unicodedata.category(char) == "Lu"


def hot_key_id(char: str) -> KeyId:
    """Return the key identifier for a hotkey character.

    Letters and digits map to their upper-case form; anything else maps to
    ``Key.unknown``.
    """
    if not is_letter_or_digit(char):
        return Key.unknown
    upper = char.upper()
    # Some letters upper-case to several characters (e.g. "ß" -> "SS")
    return upper if len(upper) == 1 else char
