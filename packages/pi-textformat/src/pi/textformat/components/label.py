"""Label component - aligned text with an optional highlighted hotkey."""

from __future__ import annotations

from pi.textformat.config import NO_HOT_KEY_SPECIFIER, FormatterOptions, TextAlignment
from pi.textformat.formatter import TextFormatter
from pi.textformat.geometry import Rect, Size
from pi.textformat.keys import KeyId
from pi.textformat.surface import Attribute, BufferSurface

_UNDERLINE = "\x1b[4m"


class Label:
    """Label component - aligned text with an optional highlighted hotkey.

    Renders exactly ``height`` lines, each padded to the requested width.
    With a height above 1 the text is word-wrapped.
    """

    def __init__(
        self,
        text: str = "",
        alignment: TextAlignment = "left",
        hot_key_specifier: str = NO_HOT_KEY_SPECIFIER,
        height: int = 1,
        normal_attr: Attribute = "",
        hot_attr: Attribute = _UNDERLINE,
    ) -> None:
        self._height = max(1, height)
        self._formatter = TextFormatter(
            text,
            FormatterOptions(
                alignment=alignment,
                hot_key_specifier=hot_key_specifier,
            ),
        )
        self._normal_attr = normal_attr
        self._hot_attr = hot_attr

        # Cache
        self._cached_width: int | None = None
        self._cached_lines: list[str] | None = None

    @property
    def formatter(self) -> TextFormatter:
        """The underlying formatter; changes to it are picked up on render."""
        return self._formatter

    @property
    def hot_key(self) -> KeyId:
        """The label's hotkey; detected on the first render."""
        return self._formatter.hot_key

    @property
    def cursor_position(self) -> int:
        return self._formatter.cursor_position

    def set_text(self, text: str) -> None:
        self._formatter.text = text
        self.invalidate()

    def set_alignment(self, alignment: TextAlignment) -> None:
        self._formatter.alignment = alignment
        self.invalidate()

    def invalidate(self) -> None:
        self._cached_width = None
        self._cached_lines = None

    def render(self, width: int) -> list[str]:
        # Check cache; changes made through ``formatter`` mark it dirty
        if (
            self._cached_lines is not None
            and self._cached_width == width
            and not self._formatter.needs_format
        ):
            return self._cached_lines

        width = max(0, width)
        size = Size(width, self._height)
        if self._formatter.size != size:
            self._formatter.size = size

        surface = BufferSurface(width, self._height)
        self._formatter.draw(
            Rect(0, 0, width, self._height),
            self._normal_attr,
            self._hot_attr,
            surface,
        )
        result = surface.lines()

        # Update cache
        self._cached_width = width
        self._cached_lines = result

        return result
