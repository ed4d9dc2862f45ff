"""pi-textformat: text layout with word wrap, alignment and hotkeys."""

# Components (re-exported from components package)
from pi.textformat.components import Label

# Configuration
from pi.textformat.config import (
    ALIGNMENTS,
    DEFAULT_HOT_KEY_TAG_MASK,
    NO_HOT_KEY_SPECIFIER,
    FormatterOptions,
    TextAlignment,
)

# Errors
from pi.textformat.errors import InvalidArgumentError, InvalidStateError

# Formatter
from pi.textformat.formatter import TextFormatter

# Geometry
from pi.textformat.geometry import Point, Rect, Size

# Hotkeys
from pi.textformat.hotkey import (
    NO_HOT_KEY,
    HotKey,
    find_hot_key,
    is_tagged,
    remove_hot_key_specifier,
    replace_hot_key_with_tag,
    untag,
)
from pi.textformat.keys import Key, KeyId

# Drawing surfaces
from pi.textformat.surface import Attribute, BufferSurface, Surface

# Utilities
from pi.textformat.utils import (
    replace_breaks_with_space,
    rune_width,
    strip_breaks,
    text_width,
)

# Line breaking and measurement
from pi.textformat.wrapping import (
    calc_rect,
    clip_and_justify,
    format_text,
    justify,
    max_lines,
    max_width,
    word_wrap,
)

__all__ = [
    # Components
    "Label",
    # Configuration
    "ALIGNMENTS",
    "DEFAULT_HOT_KEY_TAG_MASK",
    "NO_HOT_KEY_SPECIFIER",
    "FormatterOptions",
    "TextAlignment",
    # Errors
    "InvalidArgumentError",
    "InvalidStateError",
    # Formatter
    "TextFormatter",
    # Geometry
    "Point",
    "Rect",
    "Size",
    # Hotkeys
    "NO_HOT_KEY",
    "HotKey",
    "Key",
    "KeyId",
    "find_hot_key",
    "is_tagged",
    "remove_hot_key_specifier",
    "replace_hot_key_with_tag",
    "untag",
    # Surfaces
    "Attribute",
    "BufferSurface",
    "Surface",
    # Utilities
    "replace_breaks_with_space",
    "rune_width",
    "strip_breaks",
    "text_width",
    # Wrapping
    "calc_rect",
    "clip_and_justify",
    "format_text",
    "justify",
    "max_lines",
    "max_width",
    "word_wrap",
]
