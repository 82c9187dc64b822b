"""
Enum constraint implementation.
"""

import logging
from typing import Any, Dict, Iterable, List, Tuple

from .base import Constraint, ValidationContext
from ..api import ErrorCode
from ..canonical import CanonicalValue, canonicalize
from ..comparator import deep_equals
from ..utils import SchemaKeywords, dumps_json, render_value

logger = logging.getLogger("json_enum")


class EnumConstraint(Constraint):
    """
    Constraint that validates a value against an enumeration.

    Candidates are canonicalized once, when the constraint is built, and
    candidates that are deep-equal to an earlier one are dropped. The
    resulting permitted values are never modified afterwards, so a single
    instance can be shared between threads.
    """

    keyword = SchemaKeywords.ENUM

    def __init__(self, values: Iterable[Any]):
        """
        Initialize a new enum constraint.

        Args:
            values: Allowed values, as raw JSON-like values

        Raises:
            CanonicalizationError: If a value cannot be canonicalized
        """
        possible_values: List[CanonicalValue] = []
        seen = 0
        for value in values:
            seen += 1
            candidate = canonicalize(value)
            if not any(deep_equals(candidate, existing) for existing in possible_values):
                possible_values.append(candidate)

        self._possible_values: Tuple[CanonicalValue, ...] = tuple(possible_values)
        logger.debug(f"Built enum constraint with {len(self._possible_values)} "
                     f"distinct values from {seen} candidates")

    @classmethod
    def build(cls, values: Iterable[Any]) -> "EnumConstraint":
        """
        Build an enum constraint from candidate values.

        Args:
            values: Allowed values, as raw JSON-like values

        Returns:
            New enum constraint
        """
        return cls(values)

    @staticmethod
    def builder() -> "EnumConstraintBuilder":
        """Create a builder that collects candidates one at a time."""
        return EnumConstraintBuilder()

    @property
    def possible_values(self) -> Tuple[CanonicalValue, ...]:
        """Distinct permitted values, in the order they were first seen."""
        return self._possible_values

    def get_possible_values(self) -> Tuple[CanonicalValue, ...]:
        """Return the distinct permitted values; same as ``possible_values``."""
        return self._possible_values

    def validate(self, value: Any, context: ValidationContext) -> bool:
        """
        Validate a value against this enum constraint.

        Args:
            value: Value to validate
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise

        Raises:
            CanonicalizationError: If the value cannot be canonicalized
        """
        subject = canonicalize(value)
        if any(deep_equals(candidate, subject) for candidate in self._possible_values):
            return True

        message = f"{render_value(value)} is not a valid enum value"
        if context.verbose:
            logger.debug(f"Enum mismatch at '{context.path}': {message}")
        context.add_error(
            ErrorCode.ENUM_MISMATCH,
            message,
            value=value,
            keyword=self.keyword,
            constraint=self
        )
        return False

    def describe(self) -> Dict[str, Any]:
        """
        Describe this constraint as a schema fragment.

        Returns:
            Dictionary with the ``type`` and ``enum`` keywords
        """
        return {
            SchemaKeywords.TYPE: self.keyword,
            SchemaKeywords.ENUM: [value.to_python() for value in self._possible_values],
        }

    def to_json(self, separators: Tuple[str, str] = (", ", ": ")) -> str:
        """
        Serialize the schema fragment from ``describe`` to JSON text.

        Permitted numbers stay JSON numbers whatever their storage, so the
        text compiles back into an equal constraint.

        Args:
            separators: Item and key separators, as for ``json.dumps``

        Returns:
            JSON text
        """
        return dumps_json(self.describe(), separators=separators)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, EnumConstraint):
            return NotImplemented
        return frozenset(self._possible_values) == frozenset(other._possible_values)

    def __hash__(self) -> int:
        return hash(frozenset(self._possible_values))

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"EnumConstraint(values={[value.to_python() for value in self._possible_values]})"

    def __repr__(self) -> str:
        """Detailed representation of the enum constraint."""
        return self.__str__()


class EnumConstraintBuilder:
    """Collects candidate values for an ``EnumConstraint``."""

    def __init__(self):
        self._possible_values: List[Any] = []

    def possible_value(self, value: Any) -> "EnumConstraintBuilder":
        """
        Add one candidate value.

        Args:
            value: Raw JSON-like value

        Returns:
            This builder
        """
        self._possible_values.append(value)
        return self

    def possible_values(self, values: Iterable[Any]) -> "EnumConstraintBuilder":
        """
        Replace the collected candidates.

        Args:
            values: Raw JSON-like values

        Returns:
            This builder
        """
        self._possible_values = list(values)
        return self

    def build(self) -> EnumConstraint:
        """Build an enum constraint from the collected candidates."""
        return EnumConstraint(self._possible_values)
