"""
Comparison bindings: where a comparison rule gets the value it compares against.

A binding is one of three variants, chosen once at construction:

- ConstantBinding: a fixed value that must not be None.
- ProjectionBinding: a function of the validated instance returning a value
  of the same type as the property under test.
- ComparableProjectionBinding: a function of the validated instance returning
  any orderable value, for comparing against members of a different type.

Both projection variants carry an optional member descriptor and display name
that only feed error messages.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from propcheck.core.models import MemberDescriptor

from .comparison import Comparable

T = TypeVar("T")
V = TypeVar("V")


class ComparisonBinding(ABC, Generic[T, V]):
    """Resolves the comparison target for a rule."""

    __slots__ = ()

    @abstractmethod
    def resolve(self, instance: T) -> V:
        """Return the value to compare against for the given instance."""

    @property
    def value_to_compare(self) -> Comparable | None:
        """The constant comparison value, None for projections."""
        return None

    @property
    def member(self) -> MemberDescriptor | None:
        return None

    @property
    def display_name(self) -> str:
        return ""

    @property
    def is_projection(self) -> bool:
        return False

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def constant(value: V) -> "ConstantBinding[V]":
        return ConstantBinding(value)

    @staticmethod
    def projection(
        func: Callable[[T], V],
        member: MemberDescriptor | str | None = None,
        display_name: str | None = None,
    ) -> "ProjectionBinding[T, V]":
        return ProjectionBinding(func, member, display_name)

    @staticmethod
    def comparable_projection(
        func: Callable[[T], Comparable],
        member: MemberDescriptor | str | None = None,
        display_name: str | None = None,
    ) -> "ComparableProjectionBinding[T]":
        return ComparableProjectionBinding(func, member, display_name)


class ConstantBinding(ComparisonBinding[Any, V]):
    """Compares against a fixed value."""

    __slots__ = ("_value",)

    def __init__(self, value: V):
        if value is None:
            raise ValueError("value must not be None")
        object.__setattr__(self, "_value", value)

    def resolve(self, instance: Any) -> V:
        return self._value

    @property
    def value_to_compare(self) -> V:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantBinding):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((ConstantBinding, self._value))

    def __repr__(self) -> str:
        return f"ConstantBinding({self._value!r})"


class _MemberProjection(ComparisonBinding[T, V]):
    """Shared state of the two projection variants."""

    __slots__ = ("_func", "_member", "_display_name")

    def __init__(
        self,
        func: Callable[[T], V],
        member: MemberDescriptor | str | None = None,
        display_name: str | None = None,
    ):
        if not callable(func):
            raise ValueError(f"projection must be callable, got {type(func).__name__}")
        if isinstance(member, str):
            member = MemberDescriptor.from_path(member)

        object.__setattr__(self, "_func", func)
        object.__setattr__(self, "_member", member)
        object.__setattr__(self, "_display_name", display_name or "")

    def resolve(self, instance: T) -> V:
        return self._func(instance)

    @property
    def member(self) -> MemberDescriptor | None:
        return self._member

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def is_projection(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(member={self._member}, display_name={self._display_name!r})"


class ProjectionBinding(_MemberProjection[T, V]):
    """Compares against a same-typed value derived from the validated instance."""

    __slots__ = ()


class ComparableProjectionBinding(_MemberProjection[T, Comparable]):
    """Compares against any orderable value derived from the validated instance."""

    __slots__ = ()
