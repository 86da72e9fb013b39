"""
ComparisonValidator - compares a property against a constant or another member.

One validator class serves all six comparison kinds; the kind selects the
predicate. The module-level factories (equal, greater_than, ...) are the
concrete rules.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from propcheck.core.models import MemberDescriptor

from .base_validator import PropertyValidator, PropertyValidatorContext
from .binding import ComparisonBinding, ConstantBinding
from .comparison import NONE_TARGET_SIGN, ORDERING, PREDICATES, Comparable, Comparison, TProperty

T = TypeVar("T")

COMPARISON_VALUE = "ComparisonValue"
COMPARISON_PROPERTY = "ComparisonProperty"

DEFAULT_MESSAGES: dict[Comparison, str] = {
    Comparison.EQUAL: "'{PropertyName}' must be equal to '{ComparisonValue}'.",
    Comparison.NOT_EQUAL: "'{PropertyName}' must not be equal to '{ComparisonValue}'.",
    Comparison.LESS_THAN: "'{PropertyName}' must be less than '{ComparisonValue}'.",
    Comparison.GREATER_THAN: "'{PropertyName}' must be greater than '{ComparisonValue}'.",
    Comparison.GREATER_THAN_OR_EQUAL: "'{PropertyName}' must be greater than or equal to '{ComparisonValue}'.",
    Comparison.LESS_THAN_OR_EQUAL: "'{PropertyName}' must be less than or equal to '{ComparisonValue}'.",
}


class ComparisonValidator(PropertyValidator, Generic[T, TProperty]):
    """
    Validates a property against a comparison target.

    Parameters:
    - comparison: The relational operator to apply
    - target: A ComparisonBinding, or a bare value used as a constant

    A None property value always passes: requiredness belongs to NotNullValidator.
    A None comparison target orders below every value, so only not_equal,
    greater_than and greater_than_or_equal accept it.
    """

    __slots__ = ("_comparison", "_predicate", "_binding")

    def __init__(
        self,
        comparison: Comparison | str,
        target: ComparisonBinding | Any,
        message: str | None = None,
    ):
        super().__init__(message)
        kind = Comparison.from_name(comparison)
        if not isinstance(target, ComparisonBinding):
            target = ConstantBinding(target)

        object.__setattr__(self, "_comparison", kind)
        object.__setattr__(self, "_predicate", PREDICATES[kind])
        object.__setattr__(self, "_binding", target)

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        if context.property_value is None:
            # Absence is not a comparison failure; pair with NotNullValidator to forbid it
            return True

        value_to_compare = self.get_comparison_value(context)

        if not self.predicate(context.property_value, value_to_compare):
            context.message_formatter.append_argument(COMPARISON_VALUE, value_to_compare)
            context.message_formatter.append_argument(COMPARISON_PROPERTY, self._binding.display_name or "")
            return False

        return True

    def get_comparison_value(self, context: PropertyValidatorContext) -> TProperty | Comparable:
        """Resolve the comparison target for the instance in the context."""
        return self._binding.resolve(context.instance_to_validate)

    def predicate(self, value: TProperty, value_to_compare: TProperty | Comparable) -> bool:
        """
        Apply this validator's relational test.

        Raises:
            TypeError: If the two values cannot be ordered against each other
        """
        if value_to_compare is None:
            return ORDERING[self._comparison](NONE_TARGET_SIGN)

        try:
            return bool(self._predicate(value, value_to_compare))
        except TypeError as e:
            raise TypeError(
                f"Cannot apply {self._comparison.value} to {type(value).__name__} "
                f"and {type(value_to_compare).__name__}: {e}"
            ) from e

    @property
    def comparison(self) -> Comparison:
        return self._comparison

    @property
    def binding(self) -> ComparisonBinding:
        return self._binding

    @property
    def member_to_compare(self) -> MemberDescriptor | None:
        return self._binding.member

    @property
    def value_to_compare(self) -> Comparable | None:
        return self._binding.value_to_compare

    @property
    def rule_type(self) -> str:
        return self._comparison.value

    @property
    def default_message_template(self) -> str:
        return DEFAULT_MESSAGES[self._comparison]

    def __repr__(self) -> str:
        return f"ComparisonValidator({self._comparison.value}, {self._binding!r})"


def equal(target: ComparisonBinding | Any, message: str | None = None) -> ComparisonValidator:
    """Property must equal the target."""
    return ComparisonValidator(Comparison.EQUAL, target, message)


def not_equal(target: ComparisonBinding | Any, message: str | None = None) -> ComparisonValidator:
    """Property must not equal the target."""
    return ComparisonValidator(Comparison.NOT_EQUAL, target, message)


def less_than(target: ComparisonBinding | Any, message: str | None = None) -> ComparisonValidator:
    """Property must be strictly less than the target."""
    return ComparisonValidator(Comparison.LESS_THAN, target, message)


def greater_than(target: ComparisonBinding | Any, message: str | None = None) -> ComparisonValidator:
    """Property must be strictly greater than the target."""
    return ComparisonValidator(Comparison.GREATER_THAN, target, message)


def greater_than_or_equal(target: ComparisonBinding | Any, message: str | None = None) -> ComparisonValidator:
    """Property must be greater than or equal to the target."""
    return ComparisonValidator(Comparison.GREATER_THAN_OR_EQUAL, target, message)


def less_than_or_equal(target: ComparisonBinding | Any, message: str | None = None) -> ComparisonValidator:
    """Property must be less than or equal to the target."""
    return ComparisonValidator(Comparison.LESS_THAN_OR_EQUAL, target, message)


RULES: dict[Comparison, Callable[..., ComparisonValidator]] = {
    Comparison.EQUAL: equal,
    Comparison.NOT_EQUAL: not_equal,
    Comparison.LESS_THAN: less_than,
    Comparison.GREATER_THAN: greater_than,
    Comparison.GREATER_THAN_OR_EQUAL: greater_than_or_equal,
    Comparison.LESS_THAN_OR_EQUAL: less_than_or_equal,
}
