"""
Constraint package initialization.
"""

from .base import Constraint, ValidationContext
from .enums import EnumConstraint, EnumConstraintBuilder

__all__ = [
    "Constraint",
    "ValidationContext",
    "EnumConstraint",
    "EnumConstraintBuilder"
]
