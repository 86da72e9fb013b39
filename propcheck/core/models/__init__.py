"""
Core data models for the validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .member import MemberDescriptor
from .validation_failure import ValidationFailure
from .validation_result import ValidationResult
from .validation_rule import RULE_TYPES, ValidationRule, normalize_rule_type

__all__ = [
    "MemberDescriptor",
    "ValidationFailure",
    "ValidationResult",
    "ValidationRule",
    "RULE_TYPES",
    "normalize_rule_type",
]
