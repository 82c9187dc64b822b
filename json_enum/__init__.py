"""
JSON Enum Validator

This package checks JSON-like values against the fixed set of values
allowed by a JSON Schema ``enum`` keyword.
"""

import logging

from .api import ErrorCode, JsonValidator, ValidationError, ValidationFailedError, ValidationResult
from .canonical import CanonicalKind, CanonicalValue, CanonicalizationError, canonicalize
from .comparator import deep_equals
from .constraints import Constraint, EnumConstraint, EnumConstraintBuilder, ValidationContext
from .schema_compiler import SchemaCompiler
from .utils import JsonPointer
from .validator import Validator
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("json_enum")

# Export public classes and functions
__all__ = [
    "CanonicalKind",
    "CanonicalValue",
    "CanonicalizationError",
    "Constraint",
    "EnumConstraint",
    "EnumConstraintBuilder",
    "ErrorCode",
    "JsonPointer",
    "JsonValidator",
    "SchemaCompiler",
    "ValidationContext",
    "ValidationError",
    "ValidationFailedError",
    "ValidationResult",
    "Validator",
    "canonicalize",
    "deep_equals",
]
