"""
Public API for the JSON enum validator.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Enumeration of validation error codes."""
    ENUM_MISMATCH = auto()


@dataclass(frozen=True)
class ValidationError:
    """
    Represents a validation error with structured information.

    Attributes:
        code: The error code identifying the type of error
        path: JSON Pointer to the value that failed validation
        message: Human-readable error message
        schema_path: JSON Pointer to the schema location that triggered the error
        value: The value that failed validation, as it was supplied
        keyword: Schema keyword of the violated constraint
        constraint: The constraint that was violated
    """
    code: ErrorCode
    path: str
    message: str
    schema_path: Optional[str] = None
    value: Any = None
    keyword: Optional[str] = None
    constraint: Any = None

    def __str__(self) -> str:
        return f"Error at '{self.path}': {self.message}"


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any)
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_errors(self) -> None:
        """
        Raise if the validation failed.

        Raises:
            ValidationFailedError: If the result is not valid
        """
        if not self.valid:
            raise ValidationFailedError(self.errors)


class ValidationFailedError(Exception):
    """Raised on request when a validation result contains errors."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        messages = "; ".join(str(error) for error in self.errors)
        super().__init__(messages or "Validation failed")


class JsonValidator:
    """
    Main entrypoint class for enum validation of JSON data.

    This class provides a simple API for validating JSON data
    against a JSON Schema carrying an ``enum`` keyword.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize a new JSON validator.

        Args:
            verbose: Whether to log validation details
        """
        from .schema_compiler import SchemaCompiler
        from .validator import Validator

        self.verbose = verbose
        self.schema_compiler = SchemaCompiler()
        self.validator = Validator(verbose=verbose)

    def validate(self, data: Any, schema: Dict[str, Any]) -> ValidationResult:
        """
        Validate data against a JSON schema.

        Args:
            data: The data to validate
            schema: The JSON schema to validate against

        Returns:
            ValidationResult containing validation status and any errors

        Raises:
            ValueError: If the schema is not a valid enum schema
        """
        compiled_schema = self.schema_compiler.compile(schema)
        return self.validator.validate(data, compiled_schema)
