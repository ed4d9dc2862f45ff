"""Text formatter components."""

from pi.textformat.components.label import Label

__all__ = [
    "Label",
]
