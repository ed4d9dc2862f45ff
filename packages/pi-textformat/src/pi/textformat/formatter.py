"""Text formatter with a lazily recomputed line cache.

``TextFormatter`` owns a piece of text together with its alignment, target
size and hotkey settings. Reading :attr:`TextFormatter.lines` formats the
text on first access after any change and returns the cached lines
otherwise. :meth:`TextFormatter.draw` walks those lines onto a ``Surface``,
drawing the hotkey in its own attribute and tracking the cursor column the
hotkey ends up at.
"""

from __future__ import annotations

import logging
import sys

from pi.textformat.config import (
    ALIGNMENTS,
    MAX_CODEPOINT,
    FormatterOptions,
    TextAlignment,
)
from pi.textformat.errors import InvalidArgumentError, InvalidStateError
from pi.textformat.geometry import Rect, Size
from pi.textformat.hotkey import (
    NO_HOT_KEY,
    find_hot_key,
    is_tagged,
    remove_hot_key_specifier,
    replace_hot_key_with_tag,
    untag,
)
from pi.textformat.keys import Key, KeyId, hot_key_id
from pi.textformat.surface import Attribute, Surface
from pi.textformat.utils import rune_width
from pi.textformat.wrapping import format_text, max_width

logger = logging.getLogger(__name__)


class TextFormatter:
    """Formats text into aligned lines and draws them.

    Any change to ``text``, ``alignment``, ``size`` or the hotkey settings
    marks the formatter as needing a format; the next read of ``lines``
    recomputes them. The formatter is not thread-safe.
    """

    def __init__(self, text: str = "", options: FormatterOptions | None = None) -> None:
        opts = options or FormatterOptions()

        self._text = ""
        self._alignment: TextAlignment = opts.alignment
        self._size = Size(opts.width, opts.height)
        self._hot_key_specifier = opts.hot_key_specifier
        self._hot_key_tag_mask = opts.hot_key_tag_mask
        self._auto_size = opts.auto_size

        self._hot_key_pos = -1
        self._hot_key: KeyId = Key.unknown
        self._lines: list[str] = []
        self._needs_format = True

        # Column of the hotkey after the last draw, for cursor placement
        self.cursor_position = 0
        # Number of times the format pipeline has run
        self.format_count = 0

        self.text = text

    # -- configuration ------------------------------------------------------

    @property
    def text(self) -> str:
        """The text to display. It is never modified by formatting."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        if self._auto_size and value and (
            self._size.width == 0
            or self._size.height == 0
            or self._size.width != len(value)
        ):
            self._size = Size(max_width(value, sys.maxsize), 1)
        self._needs_format = True

    @property
    def alignment(self) -> TextAlignment:
        return self._alignment

    @alignment.setter
    def alignment(self, value: TextAlignment) -> None:
        if value not in ALIGNMENTS:
            raise InvalidArgumentError(f"Unknown text alignment: {value!r}")
        self._alignment = value
        self._needs_format = True

    @property
    def size(self) -> Size:
        """The area, in cells, the text is constrained to when formatted."""
        return self._size

    @size.setter
    def size(self, value: Size) -> None:
        if value.width < 0 or value.height < 0:
            raise InvalidArgumentError("Size cannot be negative.")
        self._size = value
        self._needs_format = True

    @property
    def hot_key_specifier(self) -> str:
        """Character that marks the hotkey (e.g. ``"_"``); ``"\\uffff"`` disables it."""
        return self._hot_key_specifier

    @hot_key_specifier.setter
    def hot_key_specifier(self, value: str) -> None:
        if len(value) != 1:
            raise InvalidArgumentError("Hotkey specifier must be a single character.")
        self._hot_key_specifier = value
        self._needs_format = True

    @property
    def hot_key_tag_mask(self) -> int:
        return self._hot_key_tag_mask

    @hot_key_tag_mask.setter
    def hot_key_tag_mask(self, value: int) -> None:
        if not 0 < value <= MAX_CODEPOINT:
            raise InvalidArgumentError(f"Invalid hotkey tag mask: 0x{value:X}")
        self._hot_key_tag_mask = value
        self._needs_format = True

    @property
    def auto_size(self) -> bool:
        return self._auto_size

    @auto_size.setter
    def auto_size(self, value: bool) -> None:
        self._auto_size = value

    def options(self) -> FormatterOptions:
        """Return the current configuration as a ``FormatterOptions``."""
        return FormatterOptions(
            alignment=self._alignment,
            width=self._size.width,
            height=self._size.height,
            hot_key_specifier=self._hot_key_specifier,
            hot_key_tag_mask=self._hot_key_tag_mask,
            auto_size=self._auto_size,
        )

    # -- hotkey -------------------------------------------------------------

    @property
    def hot_key_pos(self) -> int:
        """Index of the hotkey in the displayed text, or -1.

        ``draw`` places the cursor at this index on lines that do not hold
        the tagged hotkey. Formatting overwrites it.
        """
        return self._hot_key_pos

    @hot_key_pos.setter
    def hot_key_pos(self, value: int) -> None:
        self._hot_key_pos = value

    @property
    def hot_key(self) -> KeyId:
        """The hotkey as an upper-case letter or digit, or ``Key.unknown``."""
        return self._hot_key

    # -- formatting ---------------------------------------------------------

    @property
    def needs_format(self) -> bool:
        return self._needs_format

    @needs_format.setter
    def needs_format(self, value: bool) -> None:
        self._needs_format = value

    @property
    def lines(self) -> list[str]:
        """The formatted lines, recomputed only when something changed.

        The hotkey character, if any, is tagged with ``hot_key_tag_mask``.
        Raises ``InvalidStateError`` if the size has not been set.
        """
        if not self._text:
            self._lines = [""]
            self._needs_format = False
            return self._lines

        if self._needs_format:
            shown = self._text
            hot = find_hot_key(self._text, self._hot_key_specifier, True)
            self._hot_key_pos = hot.position
            self._hot_key = hot.key
            if hot != NO_HOT_KEY:
                shown = remove_hot_key_specifier(shown, hot.position, self._hot_key_specifier)
                shown = replace_hot_key_with_tag(shown, hot.position, self._hot_key_tag_mask)
                logger.debug("Hotkey %s at %d", hot.key, hot.position)

            if self._size.is_empty or (self._size.height == 0 and self._size.width > 0):
                raise InvalidStateError("Size must be set before accessing lines.")

            self._lines = format_text(
                shown,
                self._size.width,
                self._alignment,
                self._size.height > 1,
            )
            self._needs_format = False
            self.format_count += 1
            logger.debug(
                "Formatted %d chars into %d lines (width=%d, alignment=%s, wrap=%s)",
                len(shown),
                len(self._lines),
                self._size.width,
                self._alignment,
                self._size.height > 1,
            )
        return self._lines

    # -- drawing ------------------------------------------------------------

    def draw(
        self,
        bounds: Rect,
        normal_attr: Attribute,
        hot_attr: Attribute,
        surface: Surface,
    ) -> None:
        """Draw the formatted lines into *bounds* on *surface*.

        Every column of each drawn row is written: text where the line is,
        spaces elsewhere. Lines beyond ``bounds.height`` are not drawn.
        """
        if not self._text:
            return

        lines = self.lines
        surface.set_attribute(normal_attr)

        hot_seen = False
        for row, line in enumerate(lines):
            if row >= bounds.height:
                break
            if self._draw_line(surface, bounds, row, line, normal_attr, hot_attr, hot_seen):
                hot_seen = True

    def _draw_line(
        self,
        surface: Surface,
        bounds: Rect,
        row: int,
        line: str,
        normal_attr: Attribute,
        hot_attr: Attribute,
        hot_seen: bool,
    ) -> bool:
        """Draw one line; return ``True`` if it holds the hotkey."""
        mask = self._hot_key_tag_mask
        widths: list[int] = []
        hot: list[bool] = []
        hot_col = -1
        line_length = 0
        for ch in line:
            is_hot = self._is_hot_rune(ch)
            if is_hot and hot_col == -1:
                hot_col = line_length
            w = rune_width(untag(ch, mask) if is_hot else ch)
            widths.append(w)
            hot.append(is_hot)
            line_length += w

        if self._alignment == "right":
            offset = bounds.width - line_length
        elif self._alignment == "centered":
            offset = (bounds.width - line_length) // 2
        else:
            offset = 0
        x = bounds.left + offset

        if hot_col >= 0:
            self.cursor_position = offset + hot_col
        elif not hot_seen:
            self.cursor_position = offset + max(self._hot_key_pos, 0)

        y = bounds.top + row
        right = bounds.right
        col = bounds.left

        while col < min(x, right):
            surface.move_cursor(col, y)
            surface.write_rune(" ")
            col += 1

        rune_col = x
        for ch, w, is_hot in zip(line, widths, hot):
            if rune_col < bounds.left:
                rune_col += w
                continue
            if rune_col + w > right:
                return hot_col >= 0
            # Fill the gap left by a wide glyph clipped at the left edge
            while col < rune_col:
                surface.move_cursor(col, y)
                surface.write_rune(" ")
                col += 1
            surface.move_cursor(rune_col, y)
            if is_hot:
                if self._alignment == "justified":
                    self.cursor_position = rune_col - bounds.left
                surface.set_attribute(hot_attr)
                surface.write_rune(untag(ch, mask))
                surface.set_attribute(normal_attr)
            else:
                surface.write_rune(ch)
            rune_col += w
            col = max(col, rune_col)

        while col < right:
            surface.move_cursor(col, y)
            surface.write_rune(" ")
            col += 1

        return hot_col >= 0

    def _is_hot_rune(self, ch: str) -> bool:
        """Return ``True`` if *ch* is the tagged hotkey.

        A codepoint that merely has the mask bits set, such as a private-use
        glyph, is not hot unless clearing the mask yields the hotkey itself.
        """
        if self._hot_key == Key.unknown:
            return False
        mask = self._hot_key_tag_mask
        return is_tagged(ch, mask) and hot_key_id(untag(ch, mask)) == self._hot_key
