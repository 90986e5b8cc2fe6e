"""Tests for reftag.serialization module."""

import logging

import pytest

from reftag.discovery import Sort
from reftag.serialization import DecodeError, decode, encode, from_json, to_json
from reftag.tags import (
    Category,
    CategoryWithSort,
    Push,
    RecommendedWithSort,
    Unrecognized,
)


class TestDecode:
    """Test decoding JSON values."""

    def test_decode_string(self):
        """Test decoding a known code."""
        assert decode("push") == Push()

    def test_decode_sorted(self):
        """Test decoding a sorted code."""
        assert decode("recommended_popular") == RecommendedWithSort(Sort.POPULAR)

    def test_decode_unknown_string(self):
        """Test that unknown strings still decode."""
        assert decode("mystery") == Unrecognized("mystery")

    @pytest.mark.parametrize("value", [42, 1.5, True, None, ["push"], {"code": "push"}])
    def test_decode_non_string(self, value):
        """Test that every non-string JSON value is rejected."""
        with pytest.raises(DecodeError) as exc_info:
            decode(value)
        assert str(exc_info.value) == "RefTag code must be a string."

    def test_decode_error_is_value_error(self):
        """Test that DecodeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            decode(42)


class TestEncode:
    """Test encoding tags."""

    def test_encode(self):
        """Test that encoding yields the string tag."""
        assert encode(CategoryWithSort(Sort.ENDING_SOON)) == "category_ending_soon"
        assert encode(Unrecognized("raw")) == "raw"

    def test_to_json(self):
        """Test JSON text output."""
        assert to_json(Push()) == '"push"'
        assert to_json(CategoryWithSort(Sort.MAGIC)) == '"category"'


class TestJSONText:
    """Test reading tags from JSON text."""

    def test_from_json(self):
        """Test parsing JSON text."""
        assert from_json('"category"') == Category()
        assert from_json('"category_newest"') == CategoryWithSort(Sort.NEWEST)

    def test_from_json_to_json_agree(self):
        """Test that written JSON reads back to an equal tag."""
        tag = RecommendedWithSort(Sort.MOST_FUNDED)
        assert from_json(to_json(tag)) == tag

    def test_from_json_non_string(self):
        """Test that a JSON number is rejected."""
        with pytest.raises(DecodeError, match="RefTag code must be a string."):
            from_json("42")

    def test_from_json_malformed(self, caplog):
        """Test that malformed JSON raises DecodeError."""
        with caplog.at_level(logging.DEBUG, logger="reftag.serialization"):
            with pytest.raises(DecodeError, match="Invalid JSON") as exc_info:
                from_json('"push')
        assert exc_info.value.__cause__ is not None
        assert "Malformed ref tag JSON" in caplog.text
