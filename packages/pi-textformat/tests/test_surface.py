"""Tests for pi.textformat.surface -- the in-memory BufferSurface."""

from __future__ import annotations

from pi.textformat.config import FormatterOptions
from pi.textformat.formatter import TextFormatter
from pi.textformat.geometry import Rect
from pi.textformat.surface import BufferSurface

BOLD = "\x1b[1m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


def write(surface: BufferSurface, col: int, row: int, text: str) -> None:
    surface.move_cursor(col, row)
    for ch in text:
        surface.write_rune(ch)


class TestBufferSurfaceGlyphs:
    """Placement of glyphs in the cell grid."""

    def test_starts_blank(self) -> None:
        s = BufferSurface(3, 2)
        assert s.plain_lines() == ["   ", "   "]

    def test_sequential_writes_advance(self) -> None:
        s = BufferSurface(4, 1)
        write(s, 0, 0, "ab")
        assert s.plain_lines() == ["ab  "]
        assert s.cursor == (2, 0)

    def test_wide_glyph_takes_two_cells(self) -> None:
        s = BufferSurface(4, 1)
        write(s, 0, 0, "\u4e16")
        assert s.plain_lines() == ["\u4e16  "]
        assert s.cell(1, 0) == (None, "")
        assert s.cursor == (2, 0)

    def test_wide_glyph_past_edge_dropped(self) -> None:
        s = BufferSurface(3, 1)
        write(s, 2, 0, "\u4e16")
        assert s.plain_lines() == ["   "]

    def test_combining_mark_joins_previous_cell(self) -> None:
        s = BufferSurface(3, 1)
        write(s, 0, 0, "e\u0301x")
        assert s.cell(0, 0) == ("e\u0301", "")
        assert s.plain_lines() == ["e\u0301x "]

    def test_combining_mark_after_wide_glyph(self) -> None:
        s = BufferSurface(4, 1)
        write(s, 0, 0, "\u4e16\u0301")
        assert s.cell(0, 0) == ("\u4e16\u0301", "")
        assert s.cell(1, 0) == (None, "")
        assert s.plain_lines() == ["\u4e16\u0301  "]

    def test_combining_mark_after_dropped_glyph_dropped(self) -> None:
        s = BufferSurface(3, 1)
        write(s, 2, 0, "\u4e16\u0301")
        assert s.plain_lines() == ["   "]

    def test_write_outside_rows_dropped(self) -> None:
        s = BufferSurface(2, 1)
        write(s, 0, 5, "x")
        assert s.plain_lines() == ["  "]
        assert s.cursor == (1, 5)

    def test_negative_column_dropped(self) -> None:
        s = BufferSurface(2, 1)
        write(s, -1, 0, "xy")
        assert s.plain_lines() == ["y "]

    def test_clear(self) -> None:
        s = BufferSurface(2, 1)
        write(s, 0, 0, "ab")
        s.clear()
        assert s.plain_lines() == ["  "]


class TestBufferSurfaceAttributes:
    """SGR codes emitted by ``lines()``."""

    def test_default_attribute_has_no_codes(self) -> None:
        s = BufferSurface(3, 1)
        write(s, 0, 0, "ab")
        assert s.lines() == ["ab "]

    def test_attribute_reset_before_default_cells(self) -> None:
        s = BufferSurface(3, 1)
        s.set_attribute(BOLD)
        write(s, 0, 0, "a")
        s.set_attribute("")
        s.write_rune("b")
        assert s.lines() == [f"{BOLD}a{RESET}b "]

    def test_trailing_reset(self) -> None:
        s = BufferSurface(2, 1)
        s.set_attribute(RED)
        write(s, 0, 0, "ab")
        assert s.lines() == [f"{RED}ab{RESET}"]

    def test_switch_between_attributes(self) -> None:
        s = BufferSurface(2, 1)
        s.set_attribute(BOLD)
        write(s, 0, 0, "a")
        s.set_attribute(RED)
        s.write_rune("b")
        assert s.lines() == [f"{BOLD}a{RESET}{RED}b{RESET}"]

    def test_cell_records_attribute(self) -> None:
        s = BufferSurface(1, 1)
        s.set_attribute(RED)
        write(s, 0, 0, "z")
        assert s.cell(0, 0) == ("z", RED)


class TestBufferSurfaceWithFormatter:
    def test_formatter_draws_into_buffer(self) -> None:
        f = TextFormatter("hi", FormatterOptions(width=4, height=1, alignment="centered"))
        s = BufferSurface(4, 1)
        f.draw(Rect(0, 0, 4, 1), "", "", s)
        assert s.plain_lines() == [" hi "]

    def test_formatter_draws_wide_glyphs(self) -> None:
        f = TextFormatter("\u4e16\u754c", FormatterOptions(width=5, height=1))
        s = BufferSurface(5, 1)
        f.draw(Rect(0, 0, 5, 1), "", "", s)
        assert s.plain_lines() == ["\u4e16\u754c "]
