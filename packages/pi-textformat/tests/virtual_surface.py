"""Virtual surface for testing -- implements the Surface protocol in-memory.

This module provides a ``VirtualSurface`` class that satisfies the
``pi.textformat.surface.Surface`` protocol and records every call, plus the
glyph and attribute written at each cell, for assertions.
"""

from __future__ import annotations

from typing import Any


class VirtualSurface:
    """In-memory surface that records all calls for test inspection.

    Each ``write_rune`` lands at the last position given to ``move_cursor``
    and advances the column by one, whatever the glyph's width.
    """

    def __init__(self) -> None:
        self._calls: list[tuple[Any, ...]] = []
        self._cells: dict[tuple[int, int], tuple[str, Any]] = {}
        self._attr: Any = None
        self._col = 0
        self._row = 0

    # -- Surface protocol ---------------------------------------------------

    def set_attribute(self, attr: Any) -> None:
        self._attr = attr
        self._calls.append(("attr", attr))

    def move_cursor(self, col: int, row: int) -> None:
        self._col = col
        self._row = row
        self._calls.append(("move", col, row))

    def write_rune(self, char: str) -> None:
        self._cells[(self._col, self._row)] = (char, self._attr)
        self._calls.append(("write", char))
        self._col += 1

    # -- Test helpers -------------------------------------------------------

    @property
    def calls(self) -> list[tuple[Any, ...]]:
        """Return every surface call in order."""
        return list(self._calls)

    @property
    def written(self) -> str:
        """Return every written glyph as a single string."""
        return "".join(call[1] for call in self._calls if call[0] == "write")

    def row_text(self, row: int) -> str:
        """Return the glyphs written on *row*, ordered by column."""
        cols = sorted(col for (col, r) in self._cells if r == row)
        return "".join(self._cells[(col, row)][0] for col in cols)

    def char_at(self, col: int, row: int) -> str | None:
        cell = self._cells.get((col, row))
        return cell[0] if cell is not None else None

    def attr_at(self, col: int, row: int) -> Any:
        cell = self._cells.get((col, row))
        return cell[1] if cell is not None else None

    def rows_written(self) -> set[int]:
        return {r for (_, r) in self._cells}

    def clear(self) -> None:
        """Discard all recorded output."""
        self._calls.clear()
        self._cells.clear()
