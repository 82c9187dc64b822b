"""
Canonical form for JSON-like values.

Values coming out of a JSON document model are mutable trees of lists,
dicts and scalars. Before they can be compared reliably they are converted
into immutable ``CanonicalValue`` instances, tagged with the JSON category
they belong to.
"""

import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, Set


class CanonicalizationError(ValueError):
    """Raised when a raw value cannot be brought into canonical form."""


class CanonicalKind(Enum):
    """JSON category of a canonical value."""
    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    SEQUENCE = auto()
    MAPPING = auto()
    OPAQUE = auto()


@dataclass(frozen=True, eq=False)
class CanonicalValue:
    """
    Immutable, comparison-stable representation of a JSON-like value.

    Attributes:
        kind: JSON category of the value
        value: Payload. ``None`` for NULL, ``bool``/number/``str`` for
            scalars, a tuple of canonical values for SEQUENCE and a
            read-only mapping of ``str`` to canonical values for MAPPING
    """
    kind: CanonicalKind
    value: Any = None

    def to_python(self) -> Any:
        """
        Convert back into plain Python JSON values.

        Returns:
            ``None``, a scalar, a list or a dict
        """
        if self.kind is CanonicalKind.SEQUENCE:
            return [item.to_python() for item in self.value]
        if self.kind is CanonicalKind.MAPPING:
            return {key: item.to_python() for key, item in self.value.items()}
        return self.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CanonicalValue):
            return NotImplemented

        from .comparator import deep_equals
        return deep_equals(self, other)

    def __hash__(self) -> int:
        kind = self.kind
        if kind is CanonicalKind.NUMBER:
            # Equal numbers hash equally across int/float/Decimal/Fraction
            if is_nan(self.value):
                return hash((kind, "nan"))
            return hash(self.value)
        if kind is CanonicalKind.MAPPING:
            return hash((kind, frozenset(self.value.items())))
        if kind is CanonicalKind.OPAQUE:
            try:
                return hash(self.value)
            except TypeError:
                return hash((kind, type(self.value).__name__))
        return hash((kind, self.value))

    def __repr__(self) -> str:
        return f"CanonicalValue({self.kind.name}, {self.value!r})"


def is_number(value: Any) -> bool:
    """
    Check whether a raw value is a JSON number.

    Booleans are excluded even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_nan(value: Any) -> bool:
    """Check whether a number is NaN, for any supported numeric storage."""
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    try:
        return math.isnan(value)
    except (TypeError, ValueError, OverflowError):
        return False


def canonicalize(value: Any) -> CanonicalValue:
    """
    Convert a raw JSON-like value into its canonical form.

    Arrays (any sequence other than text or bytes) become SEQUENCE values and
    objects (any mapping) become MAPPING values, both converted eagerly and
    recursively. Values that are already canonical are returned unchanged,
    and values of unknown types are wrapped as OPAQUE scalars.

    Args:
        value: Raw value to convert

    Returns:
        Canonical value

    Raises:
        CanonicalizationError: If an object has a non-string key, or the
            value contains itself
    """
    return _canonicalize(value, set())


def _canonicalize(value: Any, active: Set[int]) -> CanonicalValue:
    if isinstance(value, CanonicalValue):
        return value
    if value is None:
        return CanonicalValue(CanonicalKind.NULL)
    if isinstance(value, bool):
        return CanonicalValue(CanonicalKind.BOOLEAN, value)
    if is_number(value):
        return CanonicalValue(CanonicalKind.NUMBER, value)
    if isinstance(value, str):
        return CanonicalValue(CanonicalKind.STRING, value)

    if isinstance(value, Mapping):
        with _Descent(active, value):
            items = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise CanonicalizationError(
                        f"Object keys must be strings, got {type(key).__name__}: {key!r}")
                items[key] = _canonicalize(item, active)
        return CanonicalValue(CanonicalKind.MAPPING, MappingProxyType(items))

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        with _Descent(active, value):
            items = tuple(_canonicalize(item, active) for item in value)
        return CanonicalValue(CanonicalKind.SEQUENCE, items)

    return CanonicalValue(CanonicalKind.OPAQUE, value)


class _Descent:
    """Context manager tracking the containers on the current descent path."""

    def __init__(self, active: Set[int], container: Any):
        self.active = active
        self.key = id(container)

    def __enter__(self):
        if self.key in self.active:
            raise CanonicalizationError("Cannot canonicalize a value that contains itself")
        self.active.add(self.key)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.active.discard(self.key)
