"""
propcheck - declarative property validation with composable comparison rules.
"""

from propcheck.core.models import MemberDescriptor, ValidationFailure, ValidationResult, ValidationRule
from propcheck.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine
from propcheck.core.validators import (
    Comparison,
    ComparisonBinding,
    ComparisonValidator,
    NotNullValidator,
    PropertyValidator,
    PropertyValidatorContext,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    not_equal,
)

__version__ = "0.1.0"

__all__ = [
    "Comparison",
    "ComparisonBinding",
    "ComparisonValidator",
    "NotNullValidator",
    "PropertyValidator",
    "PropertyValidatorContext",
    "MemberDescriptor",
    "ValidationFailure",
    "ValidationResult",
    "ValidationRule",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "equal",
    "not_equal",
    "less_than",
    "greater_than",
    "greater_than_or_equal",
    "less_than_or_equal",
]
