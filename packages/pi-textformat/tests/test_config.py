"""Tests for pi.textformat.config -- FormatterOptions validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pi.textformat.config import (
    DEFAULT_HOT_KEY_TAG_MASK,
    NO_HOT_KEY_SPECIFIER,
    FormatterOptions,
)


class TestFormatterOptionsDefaults:
    def test_defaults(self) -> None:
        opts = FormatterOptions()
        assert opts.alignment == "left"
        assert opts.width == 0
        assert opts.height == 0
        assert opts.hot_key_specifier == NO_HOT_KEY_SPECIFIER
        assert opts.hot_key_tag_mask == DEFAULT_HOT_KEY_TAG_MASK
        assert opts.auto_size is False


class TestFormatterOptionsAliases:
    """camelCase aliases and snake_case field names are both accepted."""

    def test_populate_by_alias(self) -> None:
        opts = FormatterOptions(hotKeySpecifier="_", hotKeyTagMask=0x80000, autoSize=True)
        assert opts.hot_key_specifier == "_"
        assert opts.hot_key_tag_mask == 0x80000
        assert opts.auto_size is True

    def test_populate_by_name(self) -> None:
        opts = FormatterOptions(hot_key_specifier="&")
        assert opts.hot_key_specifier == "&"

    def test_validate_from_json_dict(self) -> None:
        opts = FormatterOptions.model_validate(
            {"alignment": "right", "width": 10, "height": 2, "hotKeySpecifier": "_"}
        )
        assert opts.alignment == "right"
        assert opts.width == 10
        assert opts.height == 2
        assert opts.hot_key_specifier == "_"

    def test_dump_by_alias(self) -> None:
        data = FormatterOptions(hot_key_specifier="_").model_dump(by_alias=True)
        assert data["hotKeySpecifier"] == "_"
        assert data["hotKeyTagMask"] == DEFAULT_HOT_KEY_TAG_MASK
        assert data["autoSize"] is False


class TestFormatterOptionsValidation:
    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatterOptions(width=-1)

    def test_negative_height_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatterOptions(height=-1)

    @pytest.mark.parametrize("specifier", ["", "__"])
    def test_specifier_must_be_one_character(self, specifier: str) -> None:
        with pytest.raises(ValidationError):
            FormatterOptions(hot_key_specifier=specifier)

    @pytest.mark.parametrize("mask", [0, -1, 0x110000])
    def test_mask_out_of_range_rejected(self, mask: int) -> None:
        with pytest.raises(ValidationError):
            FormatterOptions(hot_key_tag_mask=mask)

    def test_unknown_alignment_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatterOptions(alignment="middle")  # type: ignore[arg-type]
