"""
Comparison kinds and the relational predicates behind them.
"""

import operator
from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Comparable(Protocol):
    """Any value supporting rich ordering comparisons."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


TProperty = TypeVar("TProperty", bound=Comparable)


class Comparison(str, Enum):
    """
    The six relational operators a comparison rule can apply.

    Values double as rule type identifiers in rule configuration.
    """

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"

    @classmethod
    def from_name(cls, name: "str | Comparison") -> "Comparison":
        """
        Parse a comparison kind.

        Accepts the value ("greater_than"), the member name ("GREATER_THAN")
        or the PascalCase spelling ("GreaterThan").

        Raises:
            ValueError: If the name does not identify a comparison kind
        """
        if isinstance(name, Comparison):
            return name

        key = str(name).strip().replace("-", "_")
        for kind in cls:
            if key.lower() == kind.value or key.lower() == kind.value.replace("_", ""):
                return kind

        raise ValueError(f"Unknown comparison: {name}")

    def __str__(self) -> str:
        return self.value


def _not_equal(value: Any, value_to_compare: Any) -> bool:
    return not operator.eq(value, value_to_compare)


PREDICATES: Mapping[Comparison, Callable[[Any, Any], bool]] = MappingProxyType({
    Comparison.EQUAL: operator.eq,
    Comparison.NOT_EQUAL: _not_equal,
    Comparison.LESS_THAN: operator.lt,
    Comparison.GREATER_THAN: operator.gt,
    Comparison.GREATER_THAN_OR_EQUAL: operator.ge,
    Comparison.LESS_THAN_OR_EQUAL: operator.le,
})

# Outcome of each kind given the sign of a three-way comparison of value against target
ORDERING: Mapping[Comparison, Callable[[int], bool]] = MappingProxyType({
    Comparison.EQUAL: lambda sign: sign == 0,
    Comparison.NOT_EQUAL: lambda sign: sign != 0,
    Comparison.LESS_THAN: lambda sign: sign < 0,
    Comparison.GREATER_THAN: lambda sign: sign > 0,
    Comparison.GREATER_THAN_OR_EQUAL: lambda sign: sign >= 0,
    Comparison.LESS_THAN_OR_EQUAL: lambda sign: sign <= 0,
})

# None orders below every value
NONE_TARGET_SIGN = 1
