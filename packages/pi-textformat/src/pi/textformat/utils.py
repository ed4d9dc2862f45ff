"""Text utilities: column width measurement and line-break normalization.

Every codepoint has a terminal column width of 0 (combining marks, control
characters), 1 (most glyphs) or 2 (wide East Asian glyphs, emoji). Width is
used for screen placement only; text manipulation works on ``str`` indices.
"""

from __future__ import annotations

import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Codepoint width
# ---------------------------------------------------------------------------


def rune_width(char: str) -> int:
    """Return the terminal column width of a single codepoint.

    Control characters count as 0; anything ``wcwidth`` cannot measure
    also counts as 0.
    """
    if not char:
        return 0
    cp = ord(char)
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    if cp < 0x7F:
        return 1
    return max(_wcwidth.wcwidth(char), 0)


def text_width(text: str) -> int:
    """Return the sum of the column widths of every codepoint in *text*."""
    if not text:
        return 0

    # Fast ASCII path: all codepoints in 0x20..0x7E
    if all(0x20 <= ord(ch) <= 0x7E for ch in text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    return _cache_width(text, sum(rune_width(ch) for ch in text))


# ---------------------------------------------------------------------------
# Line-break normalization
# ---------------------------------------------------------------------------


def _map_breaks(text: str, replacement: str) -> str:
    """Replace every ``\\n``, ``\\r`` and ``\\r\\n`` in *text* with *replacement*."""
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\n":
            out.append(replacement)
        elif ch == "\r":
            out.append(replacement)
            if i + 1 < n and text[i + 1] == "\n":
                i += 1
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def strip_breaks(text: str) -> str:
    """Remove all line-break sequences from *text*.

    A ``\\r\\n`` pair is removed as one unit; every other codepoint keeps
    its order.
    """
    return _map_breaks(text, "")


def replace_breaks_with_space(text: str) -> str:
    """Replace each line-break sequence in *text* with a single space."""
    return _map_breaks(text, " ")
