"""Line breaking, clipping, justification and text measurement.

``word_wrap`` and ``clip_and_justify`` count codepoints, not columns: a line
of wide glyphs may render wider than *width* cells. ``max_width`` and
``calc_rect`` measure in columns.
"""

from __future__ import annotations

from pi.textformat.config import ALIGNMENTS, TextAlignment
from pi.textformat.errors import InvalidArgumentError
from pi.textformat.geometry import Rect
from pi.textformat.utils import (
    replace_breaks_with_space,
    rune_width,
    strip_breaks,
    text_width,
)


def _check_width(width: int) -> None:
    if width < 0:
        raise InvalidArgumentError("Width cannot be negative.")


def _check_alignment(alignment: str) -> None:
    if alignment not in ALIGNMENTS:
        raise InvalidArgumentError(f"Unknown text alignment: {alignment!r}")


# ---------------------------------------------------------------------------
# word_wrap
# ---------------------------------------------------------------------------


def word_wrap(
    text: str,
    width: int,
    preserve_trailing_spaces: bool = False,
) -> list[str]:
    """Break *text* into lines of at most *width* codepoints.

    Line breaks are stripped first. Each line ends at the last space that
    fits; a window without any space is split mid-word at exactly *width*.
    The space a line breaks on is dropped unless *preserve_trailing_spaces*
    is set, in which case it starts the next line.

    Empty text (or a width of 0) produces no lines at all.
    """
    _check_width(width)

    lines: list[str] = []
    if not text or width == 0:
        return lines

    runes = strip_breaks(text)
    start = 0

    while start + width < len(runes):
        end = start + width
        while runes[end] != " " and end > start:
            end -= 1
        if end == start:
            end = start + width
        lines.append(runes[start:end])
        start = end
        if runes[end] == " " and not preserve_trailing_spaces:
            start += 1

    if start < len(runes):
        lines.append(runes[start:])

    return lines


# ---------------------------------------------------------------------------
# clip_and_justify / justify
# ---------------------------------------------------------------------------


def clip_and_justify(text: str, width: int, alignment: TextAlignment) -> str:
    """Clip *text* to *width* codepoints, justifying it if it already fits.

    Only ``"justified"`` changes text that fits; padding for the other
    alignments is left to the renderer.
    """
    _check_width(width)
    _check_alignment(alignment)

    if not text:
        return text
    if len(text) > width:
        return text[:width]
    if alignment == "justified":
        return justify(text, width)
    return text


def justify(text: str, width: int, space_char: str = " ") -> str:
    """Spread the words of *text* so the line approaches *width*.

    Words are separated by single spaces. Every gap receives the same number
    of *space_char* characters, ``(width - letters) // (words - 1)``; the
    remainder of that division is not distributed, so the result is shorter
    than *width* whenever the gaps do not divide evenly.
    """
    _check_width(width)
    if not text:
        return text

    words = text.split(" ")
    if len(words) < 2:
        return text

    text_count = sum(len(word) for word in words)
    spaces = (width - text_count) // (len(words) - 1)
    return (space_char * spaces).join(words)


# ---------------------------------------------------------------------------
# format_text
# ---------------------------------------------------------------------------


def format_text(
    text: str,
    width: int,
    alignment: TextAlignment,
    wrap: bool,
    preserve_trailing_spaces: bool = False,
) -> list[str]:
    """Lay *text* out as lines no wider than *width* codepoints.

    Without word wrap, line breaks become spaces and the whole text is
    clipped to a single line. With word wrap, every ``\\n``-separated
    segment is wrapped on its own; an empty segment followed by a break
    still produces an empty line.

    Empty text or a width of 0 yields a single empty line.
    """
    _check_width(width)
    if preserve_trailing_spaces and not wrap:
        raise InvalidArgumentError("preserve_trailing_spaces requires wrap to be enabled.")
    _check_alignment(alignment)

    if not text or width == 0:
        return [""]

    if not wrap:
        return [clip_and_justify(replace_breaks_with_space(text), width, alignment)]

    result: list[str] = []
    segments = text.split("\n")
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        wrapped = word_wrap(segment, width, preserve_trailing_spaces)
        for line in wrapped:
            result.append(clip_and_justify(line, width, alignment))
        if not wrapped and i < last:
            result.append("")

    # Text made only of break characters wraps to nothing
    return result or [""]


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


def max_lines(text: str, width: int) -> int:
    """Return how many lines *text* occupies when wrapped at *width*."""
    return len(format_text(text, width, "left", True))


def max_width(text: str, width: int) -> int:
    """Return the widest line, in columns, of *text* wrapped at *width*."""
    lines = format_text(text, width, "left", True)
    return max((text_width(line) for line in lines), default=0)


def calc_rect(x: int, y: int, text: str) -> Rect:
    """Return the rectangle at (*x*, *y*) needed to show *text* unwrapped.

    Each explicit line is measured in columns; ``\\r`` is ignored and every
    other codepoint occupies at least one column.
    """
    if not text:
        return Rect(x, y, 0, 0)

    widest = 0
    lines = 1
    cols = 0
    for ch in text:
        if ch == "\n":
            lines += 1
            widest = max(widest, cols)
            cols = 0
        elif ch != "\r":
            cols += max(rune_width(ch), 1)
    widest = max(widest, cols)

    return Rect(x, y, widest, lines)
