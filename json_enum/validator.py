"""
Validator implementation for compiled constraints.
"""

import logging
from typing import Any

from .constraints import Constraint, ValidationContext
from .api import ValidationResult

logger = logging.getLogger("json_enum")


class Validator:
    """
    Validates data against compiled constraints.

    Each call gets its own validation context, so one validator and one
    constraint can serve concurrent callers.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize a new validator.

        Args:
            verbose: Whether to log validation details
        """
        self.verbose = verbose

    def validate(self, data: Any, constraint: Constraint) -> ValidationResult:
        """
        Validate data against a compiled constraint.

        Args:
            data: Data to validate
            constraint: Compiled constraint to validate against

        Returns:
            ValidationResult containing validation status and errors
        """
        context = ValidationContext(verbose=self.verbose)

        # Failures point at the keyword that rejected the value
        keyword = getattr(constraint, "keyword", None)
        if keyword:
            with context.with_schema_path(keyword):
                valid = constraint.validate(data, context)
        else:
            valid = constraint.validate(data, context)

        if self.verbose:
            logger.debug(f"Validated against {constraint}: {len(context.errors)} error(s)")

        return ValidationResult(
            valid=valid,
            errors=context.errors
        )
