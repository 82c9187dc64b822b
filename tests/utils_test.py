#!/usr/bin/env python3
"""
Tests for utility classes and functions.
"""
import json
from decimal import Decimal
from fractions import Fraction

import pytest

# autopep8: off
from utils import setup
setup()
from json_enum import JsonPointer, canonicalize
from json_enum.utils import SchemaKeywords, dumps_json, render_value
# autopep8: on


class TestJsonPointer:
    """Tests for JsonPointer class."""

    def test_from_parts(self):
        """Test creating a JSON Pointer from path parts."""
        assert JsonPointer.from_parts([]) == ""
        assert JsonPointer.from_parts(["foo"]) == "/foo"
        assert JsonPointer.from_parts(["foo", "bar"]) == "/foo/bar"
        assert JsonPointer.from_parts(["foo", "bar", "0"]) == "/foo/bar/0"
        assert JsonPointer.from_parts(["a/b", "c~d"]) == "/a~1b/c~0d"

    def test_escape_part(self):
        """Test escaping path parts."""
        assert JsonPointer.escape_part("foo") == "foo"
        assert JsonPointer.escape_part("foo/bar") == "foo~1bar"
        assert JsonPointer.escape_part("foo~bar") == "foo~0bar"
        assert JsonPointer.escape_part("foo/bar~baz") == "foo~1bar~0baz"
        assert JsonPointer.escape_part("~1") == "~01"


class TestRenderValue:
    """Tests for rendering values in error messages."""

    def test_strings_are_unquoted(self):
        """Test that strings are shown as-is."""
        assert render_value("yellow") == "yellow"

    def test_json_values(self):
        """Test that other values are shown as compact JSON."""
        assert render_value(3) == "3"
        assert render_value(None) == "null"
        assert render_value(True) == "true"
        assert render_value([True, None]) == "[true,null]"
        assert render_value({"a": [1, "x"]}) == '{"a":[1,"x"]}'

    def test_decimal_is_a_number(self):
        """Test that Decimal values render as numbers, not strings."""
        assert render_value(Decimal("2.5")) == "2.5"
        assert render_value([Decimal("1E+30")]) == "[1E+30]"

    def test_canonical_values(self):
        """Test that canonical values render like their raw form."""
        assert render_value(canonicalize([1, "x"])) == '[1,"x"]'

    def test_values_json_cannot_express(self):
        """Test the fallbacks for non-JSON values."""
        assert render_value(b"raw") == "\"b'raw'\""

        cyclic = []
        cyclic.append(cyclic)
        assert render_value(cyclic) == "[[...]]"


class TestDumpsJson:
    """Tests for number-preserving JSON serialization."""

    def test_matches_json_module(self):
        """Test that plain JSON values serialize like json.dumps."""
        document = {"a": [1, 2.5, None, True, "x"], "b": {}}
        assert dumps_json(document) == json.dumps(document, separators=(",", ":"))
        assert dumps_json(document, separators=(", ", ": ")) == json.dumps(document)

    def test_decimal_digits_are_kept(self):
        """Test that decimals keep every digit and read back as numbers."""
        text = dumps_json([Decimal("0.1"), Decimal("123456789.123456789")])
        assert text == "[0.1,123456789.123456789]"
        assert json.loads(text, parse_float=Decimal) == [Decimal("0.1"), Decimal("123456789.123456789")]

    def test_other_numbers(self):
        """Test fractions, non-finite decimals and big integers."""
        assert dumps_json(Fraction(1, 2)) == "0.5"
        assert dumps_json(Decimal("Infinity")) == "Infinity"
        assert dumps_json(10 ** 30) == "1" + "0" * 30

    def test_keys(self):
        """Test that scalar keys are written as strings like json.dumps."""
        assert dumps_json({1: "a", None: "b"}) == '{"1":"a","null":"b"}'
        with pytest.raises(TypeError):
            dumps_json({(1, 2): "pair"})

    def test_cycle(self):
        """Test that self-containing values are rejected."""
        cyclic = {}
        cyclic["self"] = cyclic
        with pytest.raises(ValueError):
            dumps_json(cyclic)


class TestSchemaKeywords:
    """Tests for SchemaKeywords class."""

    def test_keywords(self):
        """Test the keyword constants."""
        assert SchemaKeywords.ENUM == "enum"
        assert SchemaKeywords.TYPE == "type"
        assert "title" in SchemaKeywords.ANNOTATIONS
        assert "enum" not in SchemaKeywords.ANNOTATIONS


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
