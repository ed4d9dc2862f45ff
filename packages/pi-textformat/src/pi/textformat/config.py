"""Formatter configuration.

Alignment, size and hotkey settings live on the ``TextFormatter`` itself;
``FormatterOptions`` is the validated, serializable form of the same values,
with camelCase aliases for JSON compatibility.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TextAlignment = Literal["left", "right", "centered", "justified"]

ALIGNMENTS: tuple[TextAlignment, ...] = ("left", "right", "centered", "justified")

# Specifier value that disables hotkey detection
NO_HOT_KEY_SPECIFIER = "\uffff"

# OR-ing this into a BMP codepoint lands in Supplementary Private Use Area-B
DEFAULT_HOT_KEY_TAG_MASK = 0x100000

MAX_CODEPOINT = 0x10FFFF


class FormatterOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    alignment: TextAlignment = "left"
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    hot_key_specifier: str = Field(
        default=NO_HOT_KEY_SPECIFIER,
        alias="hotKeySpecifier",
        min_length=1,
        max_length=1,
    )
    hot_key_tag_mask: int = Field(
        default=DEFAULT_HOT_KEY_TAG_MASK,
        alias="hotKeyTagMask",
        gt=0,
        le=MAX_CODEPOINT,
    )
    auto_size: bool = Field(default=False, alias="autoSize")
