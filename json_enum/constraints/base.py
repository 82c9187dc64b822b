"""
Base constraint classes for the JSON enum validator.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..api import ValidationError, ValidationResult, ErrorCode
from ..utils import JsonPointer


class ValidationContext:
    """
    Context for validation operations.

    This class maintains state during the validation process,
    including the current path and error collection.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize a new validation context.

        Args:
            verbose: Whether to log additional details
        """
        self.errors: List[ValidationError] = []
        self.path_parts: List[str] = []
        self.schema_path_parts: List[str] = []
        self.verbose = verbose

    @property
    def path(self) -> str:
        """
        Get the current JSON Pointer path.

        Returns:
            JSON Pointer string for the current path
        """
        return JsonPointer.from_parts(self.path_parts)

    @property
    def schema_path(self) -> str:
        """
        Get the current schema JSON Pointer path.

        Returns:
            JSON Pointer string for the current schema path
        """
        return JsonPointer.from_parts(self.schema_path_parts)

    def push_path(self, part: Any) -> None:
        """
        Push a path part onto the current path.

        Args:
            part: Path segment to add
        """
        self.path_parts.append(str(part))

    def pop_path(self) -> None:
        """Remove the last path part from the current path."""
        if self.path_parts:
            self.path_parts.pop()

    def push_schema_path(self, part: Any) -> None:
        """
        Push a path part onto the current schema path.

        Args:
            part: Path segment to add
        """
        self.schema_path_parts.append(str(part))

    def pop_schema_path(self) -> None:
        """Remove the last path part from the current schema path."""
        if self.schema_path_parts:
            self.schema_path_parts.pop()

    def add_error(self,
                  code: ErrorCode,
                  message: str,
                  value: Any = None,
                  keyword: Optional[str] = None,
                  constraint: Any = None) -> ValidationError:
        """
        Add a validation error to the context.

        Args:
            code: Error code
            message: Error message
            value: Value that failed validation
            keyword: Schema keyword of the violated constraint
            constraint: Constraint that was violated

        Returns:
            The recorded error
        """
        error = ValidationError(
            code=code,
            path=self.path,
            message=message,
            schema_path=self.schema_path,
            value=value,
            keyword=keyword,
            constraint=constraint
        )
        self.errors.append(error)
        return error

    def with_path(self, part: Any):
        """
        Context manager for adding a path part temporarily.

        Args:
            part: Path segment to add

        Returns:
            Context manager
        """
        return PathContext(self, part)

    def with_schema_path(self, part: Any):
        """
        Context manager for adding a schema path part temporarily.

        Args:
            part: Path segment to add

        Returns:
            Context manager
        """
        return SchemaPathContext(self, part)

    def __str__(self) -> str:
        return f"ValidationContext(path={self.path}, errors={len(self.errors)})"


class PathContext:
    """Context manager for temporarily adding a path part."""

    def __init__(self, context: ValidationContext, part: Any):
        self.context = context
        self.part = part

    def __enter__(self):
        self.context.push_path(self.part)
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.context.pop_path()


class SchemaPathContext:
    """Context manager for temporarily adding a schema path part."""

    def __init__(self, context: ValidationContext, part: Any):
        self.context = context
        self.part = part

    def __enter__(self):
        self.context.push_schema_path(self.part)
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.context.pop_schema_path()


class Constraint(ABC):
    """
    Base class for all schema constraints.

    A constraint validates a value and records any failure in the
    validation context it is given.
    """

    @abstractmethod
    def validate(self, value: Any, context: ValidationContext) -> bool:
        """
        Validate a value against this constraint.

        Args:
            value: Value to validate
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        pass

    def check(self, value: Any) -> ValidationResult:
        """
        Validate a value in a fresh context and return the outcome.

        Args:
            value: Value to validate

        Returns:
            ValidationResult containing validation status and errors
        """
        context = ValidationContext()
        valid = self.validate(value, context)
        return ValidationResult(valid=valid, errors=context.errors)

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"{self.__class__.__name__}"

    def __repr__(self) -> str:
        """Detailed representation of the constraint."""
        return self.__str__()
