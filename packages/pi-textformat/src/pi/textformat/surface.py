"""Drawing surface abstraction.

Provides the ``Surface`` protocol the formatter draws through and a concrete
``BufferSurface`` that records glyphs and attributes in an in-memory cell
grid and renders it back to ANSI-styled lines.
"""

from __future__ import annotations

from typing import Any, Protocol

from pi.textformat.utils import rune_width

# Attributes are opaque to the formatter. ``BufferSurface`` expects SGR
# prefix strings such as "\x1b[1;31m"; "" is the terminal default.
Attribute = Any

_RESET = "\x1b[0m"


# ---------------------------------------------------------------------------
# Surface protocol
# ---------------------------------------------------------------------------


class Surface(Protocol):
    """Interface for glyph output."""

    def set_attribute(self, attr: Attribute) -> None: ...

    def move_cursor(self, col: int, row: int) -> None: ...

    def write_rune(self, char: str) -> None: ...


# ---------------------------------------------------------------------------
# BufferSurface implementation
# ---------------------------------------------------------------------------


class _Cell:
    __slots__ = ("char", "attr")

    def __init__(self, char: str | None = " ", attr: Attribute = "") -> None:
        # ``None`` marks the right half of a wide glyph
        self.char = char
        self.attr = attr


class BufferSurface:
    """Surface backed by a ``rows`` x ``columns`` grid of cells.

    Writes outside the grid are dropped. A wide glyph occupies its cell and
    the one to its right; a zero-width glyph joins the previous cell.
    """

    def __init__(self, columns: int, rows: int) -> None:
        self._columns = columns
        self._rows = rows
        self._grid = [[_Cell() for _ in range(columns)] for _ in range(rows)]
        self._attr: Attribute = ""
        self._col = 0
        self._row = 0

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cursor(self) -> tuple[int, int]:
        return (self._col, self._row)

    # -- Surface protocol ---------------------------------------------------

    def set_attribute(self, attr: Attribute) -> None:
        self._attr = attr

    def move_cursor(self, col: int, row: int) -> None:
        self._col = col
        self._row = row

    def write_rune(self, char: str) -> None:
        w = rune_width(char)
        if not 0 <= self._row < self._rows:
            self._col += w
            return

        row = self._grid[self._row]
        if w == 0:
            prev = self._col - 1
            if prev >= self._columns:
                return
            # Skip back over the right half of a wide glyph
            while prev >= 0 and row[prev].char is None:
                prev -= 1
            if prev >= 0:
                row[prev].char += char
            return

        if 0 <= self._col and self._col + w <= self._columns:
            row[self._col] = _Cell(char, self._attr)
            if w == 2:
                row[self._col + 1] = _Cell(None, self._attr)
        self._col += w

    # -- output -------------------------------------------------------------

    def cell(self, col: int, row: int) -> tuple[str | None, Attribute]:
        """Return the ``(char, attr)`` pair stored at *col*, *row*."""
        c = self._grid[row][col]
        return (c.char, c.attr)

    def lines(self) -> list[str]:
        """Render every row, switching SGR codes where the attribute changes."""
        result: list[str] = []
        for row in self._grid:
            parts: list[str] = []
            active: Attribute = ""
            for c in row:
                if c.char is None:
                    continue
                if c.attr != active:
                    if active:
                        parts.append(_RESET)
                    if c.attr:
                        parts.append(c.attr)
                    active = c.attr
                parts.append(c.char)
            if active:
                parts.append(_RESET)
            result.append("".join(parts))
        return result

    def plain_lines(self) -> list[str]:
        """Render every row without attributes."""
        return ["".join(c.char for c in row if c.char is not None) for row in self._grid]

    def clear(self) -> None:
        """Reset every cell to a default-attribute space."""
        self._grid = [[_Cell() for _ in range(self._columns)] for _ in range(self._rows)]
