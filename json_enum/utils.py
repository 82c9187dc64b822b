"""
Utility classes and functions for the JSON enum validator.
"""

import json
import numbers
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any, List, Set, Tuple

from .canonical import CanonicalValue, is_number


class JsonPointer:
    """
    Utility class for building JSON Pointers (RFC 6901).

    JSON Pointers locate the failing value and the failing schema keyword
    in validation errors.
    """

    @staticmethod
    def from_parts(parts: List[str]) -> str:
        """
        Create a JSON Pointer from path parts.

        Args:
            parts: List of path segments

        Returns:
            JSON Pointer string
        """
        if not parts:
            return ""

        return "/" + "/".join(JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: str) -> str:
        """
        Escape a JSON Pointer path segment.

        Args:
            part: Path segment to escape

        Returns:
            Escaped path segment
        """
        # ~ must be escaped before /
        return str(part).replace("~", "~0").replace("/", "~1")


class SchemaKeywords:
    """Constants for the JSON Schema keywords this package reads or writes."""

    TYPE = "type"
    ENUM = "enum"

    # Annotations that may accompany an enum without changing validation
    ID = "$id"
    SCHEMA = "$schema"
    TITLE = "title"
    DESCRIPTION = "description"
    DEFAULT = "default"
    EXAMPLES = "examples"
    COMMENT = "$comment"

    ANNOTATIONS = frozenset({ID, SCHEMA, TITLE, DESCRIPTION, DEFAULT, EXAMPLES, COMMENT})


def dumps_json(value: Any, separators: Tuple[str, str] = (",", ":")) -> str:
    """
    Serialize a JSON-like value to JSON text, keeping every number a number.

    ``json.dumps`` cannot write ``Decimal`` or ``Fraction`` values. Here
    integers and finite decimals are written with all their digits and
    other numbers through ``float``, so a reader gets back the same numeric value.
    Canonical values are written like their plain form.

    Args:
        value: Value to serialize
        separators: Item and key separators, as for ``json.dumps``

    Returns:
        JSON text

    Raises:
        TypeError: If an object key is not a string or scalar
        ValueError: If the value contains itself
    """
    return _encode(value, separators, set())


def _encode(value: Any, separators: Tuple[str, str], active: Set[int]) -> str:
    item_separator, key_separator = separators

    if isinstance(value, CanonicalValue):
        value = value.to_python()
    if value is None or isinstance(value, (bool, str)):
        return json.dumps(value)
    if is_number(value):
        return _encode_number(value)

    if isinstance(value, Mapping):
        with _Visit(active, value):
            items = [_encode_key(key) + key_separator + _encode(item, separators, active)
                     for key, item in value.items()]
        return "{" + item_separator.join(items) + "}"

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        with _Visit(active, value):
            items = [_encode(item, separators, active) for item in value]
        return "[" + item_separator.join(items) + "]"

    return json.dumps(str(value))


def _encode_number(value: Any) -> str:
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite():
        # Decimal's str() is a valid JSON number token, e.g. "1.5" or "1E+30"
        return str(value)
    return json.dumps(float(value))


def _encode_key(key: Any) -> str:
    if isinstance(key, str):
        return json.dumps(key)
    if key is None or isinstance(key, bool) or is_number(key):
        return json.dumps(_encode(key, (",", ":"), set()))
    raise TypeError(f"Object keys must be strings, got {type(key).__name__}")


class _Visit:
    """Context manager tracking the containers being serialized."""

    def __init__(self, active: Set[int], container: Any):
        self.active = active
        self.key = id(container)

    def __enter__(self):
        if self.key in self.active:
            raise ValueError("Circular reference detected")
        self.active.add(self.key)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.active.discard(self.key)


def render_value(value: Any) -> str:
    """
    Render a raw JSON-like value for an error message.

    Strings are shown as-is; everything else is shown as compact JSON text,
    with values JSON cannot express shown as strings.

    Args:
        value: Value to render

    Returns:
        Display text
    """
    if isinstance(value, CanonicalValue):
        value = value.to_python()
    if isinstance(value, str):
        return value
    try:
        return dumps_json(value)
    except (TypeError, ValueError):
        # Circular references or unsupported keys
        return repr(value)
