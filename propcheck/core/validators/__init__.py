"""
Property validator implementations.

Provides the comparison validators (equal, not_equal, less_than, greater_than,
greater_than_or_equal, less_than_or_equal), their comparison bindings, and the
not-null rule that governs absent values.
"""

from .base_validator import PropertyValidator, PropertyValidatorContext
from .binding import (
    ComparableProjectionBinding,
    ComparisonBinding,
    ConstantBinding,
    ProjectionBinding,
)
from .comparison import ORDERING, PREDICATES, Comparable, Comparison
from .comparison_validator import (
    COMPARISON_PROPERTY,
    COMPARISON_VALUE,
    DEFAULT_MESSAGES,
    RULES,
    ComparisonValidator,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    not_equal,
)
from .message_formatter import MessageFormatter
from .not_null_validator import NotNullValidator

__all__ = [
    "PropertyValidator",
    "PropertyValidatorContext",
    "MessageFormatter",
    "Comparable",
    "Comparison",
    "PREDICATES",
    "ORDERING",
    "ComparisonBinding",
    "ConstantBinding",
    "ProjectionBinding",
    "ComparableProjectionBinding",
    "ComparisonValidator",
    "COMPARISON_VALUE",
    "COMPARISON_PROPERTY",
    "DEFAULT_MESSAGES",
    "RULES",
    "NotNullValidator",
    "equal",
    "not_equal",
    "less_than",
    "greater_than",
    "greater_than_or_equal",
    "less_than_or_equal",
]
