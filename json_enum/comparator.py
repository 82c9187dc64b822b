"""
Structural equality for canonical JSON values.
"""

from typing import Any

from .canonical import CanonicalKind, CanonicalValue, canonicalize, is_nan


def deep_equals(a: Any, b: Any) -> bool:
    """
    Compare two JSON-like values structurally.

    Both arguments are canonicalized first, so raw values and canonical
    values can be mixed freely. Values of different JSON categories are
    never equal: ``"1"`` does not equal ``1`` and ``True`` does not equal
    ``1``. Numbers compare by mathematical value regardless of how they are
    stored, so ``4 == 4.0 == Decimal("4")``.

    Args:
        a: First value
        b: Second value

    Returns:
        True if the values are structurally equal
    """
    return _equals(canonicalize(a), canonicalize(b))


def _equals(a: CanonicalValue, b: CanonicalValue) -> bool:
    if a is b:
        return True
    if a.kind is not b.kind:
        return False

    kind = a.kind
    if kind is CanonicalKind.NULL:
        return True
    if kind is CanonicalKind.NUMBER:
        return numbers_equal(a.value, b.value)
    if kind is CanonicalKind.SEQUENCE:
        return _sequences_equal(a.value, b.value)
    if kind is CanonicalKind.MAPPING:
        return _mappings_equal(a.value, b.value)
    if kind is CanonicalKind.OPAQUE:
        return a.value is b.value or a.value == b.value

    # BOOLEAN and STRING
    return a.value == b.value


def numbers_equal(a: Any, b: Any) -> bool:
    """
    Compare two numbers by mathematical value.

    Mixed comparisons between ``int``, ``float``, ``Decimal`` and
    ``Fraction`` are exact in Python, so integers beyond the 53-bit float
    mantissa are not rounded before comparison. NaN equals NaN.

    Args:
        a: First number
        b: Second number

    Returns:
        True if both numbers denote the same value
    """
    a_nan = is_nan(a)
    b_nan = is_nan(b)
    if a_nan or b_nan:
        return a_nan and b_nan
    return a == b


def _sequences_equal(a: tuple, b: tuple) -> bool:
    if len(a) != len(b):
        return False
    return all(_equals(x, y) for x, y in zip(a, b))


def _mappings_equal(a, b) -> bool:
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b:
            return False
        if not _equals(value, b[key]):
            return False
    return True
