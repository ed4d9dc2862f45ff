"""Hotkey discovery and tagging.

A hotkey is marked in text by a specifier character (e.g. ``"_File"``) or,
as a legacy fallback, by the first upper-case letter. Once found, the
specifier is removed and the hotkey character is *tagged* by OR-ing a bit
mask into its codepoint, so the marker survives word wrapping and
justification without a side channel. Renderers test for the mask with
:func:`is_tagged` and draw :func:`untag` of the character in hot colour.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pi.textformat.config import (
    DEFAULT_HOT_KEY_TAG_MASK,
    MAX_CODEPOINT,
    NO_HOT_KEY_SPECIFIER,
)
from pi.textformat.keys import (
    Key,
    KeyId,
    hot_key_id,
    is_letter_or_digit,
    is_upper_case_letter,
)

logger = logging.getLogger(__name__)

_REPLACEMENT_CHAR = "\ufffd"


@dataclass(frozen=True)
class HotKey:
    """A hotkey found in text.

    ``position`` indexes the text *after* the specifier has been removed.
    """

    position: int
    key: KeyId


NO_HOT_KEY = HotKey(-1, Key.unknown)


def find_hot_key(
    text: str,
    specifier: str,
    first_upper_case: bool = False,
) -> HotKey:
    """Find the hotkey in *text*.

    The first *specifier* followed by another character selects that
    character. If no specifier is present and *first_upper_case* is set, the
    first upper-case letter is used instead. Replacement characters
    (U+FFFD) are skipped but still counted in positions.

    Returns ``NO_HOT_KEY`` when detection is disabled, nothing is found, or
    the selected character is not a letter or digit.
    """
    if not text or specifier == NO_HOT_KEY_SPECIFIER:
        return NO_HOT_KEY

    hot_char = ""
    hot_pos = -1

    for i, ch in enumerate(text):
        if ch == _REPLACEMENT_CHAR:
            continue
        if ch == specifier:
            hot_pos = i
        elif hot_pos > -1:
            hot_char = ch
            break

    if hot_pos == -1 and first_upper_case:
        for i, ch in enumerate(text):
            if ch == _REPLACEMENT_CHAR:
                continue
            if is_upper_case_letter(ch):
                hot_char = ch
                hot_pos = i
                break

    if not hot_char or hot_pos == -1:
        return NO_HOT_KEY
    if not is_letter_or_digit(hot_char):
        return NO_HOT_KEY
    return HotKey(hot_pos, hot_key_id(hot_char))


def remove_hot_key_specifier(text: str, position: int, specifier: str) -> str:
    """Remove the *specifier* located at *position* in *text*.

    Text is returned unchanged when the character at *position* is not the
    specifier.
    """
    if not text:
        return text
    if 0 <= position < len(text) and text[position] == specifier:
        return text[:position] + text[position + 1 :]
    return text


def replace_hot_key_with_tag(
    text: str,
    position: int,
    mask: int = DEFAULT_HOT_KEY_TAG_MASK,
) -> str:
    """Tag the character at *position* as the hotkey.

    Only letters and digits are tagged. A character whose tagged value would
    fall outside the Unicode range is left as is.
    """
    if not 0 <= position < len(text):
        return text
    ch = text[position]
    if not is_letter_or_digit(ch):
        return text
    tagged = ord(ch) | mask
    if tagged > MAX_CODEPOINT:
        logger.debug("Cannot tag hotkey U+%04X with mask 0x%X", ord(ch), mask)
        return text
    return text[:position] + chr(tagged) + text[position + 1 :]


def is_tagged(char: str, mask: int = DEFAULT_HOT_KEY_TAG_MASK) -> bool:
    """Return ``True`` if *char* carries the hotkey tag."""
    return (ord(char) & mask) == mask


def untag(char: str, mask: int = DEFAULT_HOT_KEY_TAG_MASK) -> str:
    """Clear the hotkey tag from *char*."""
    return chr(ord(char) & ~mask)
