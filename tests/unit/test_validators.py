"""
Unit tests for property validators.

Includes property-based testing with hypothesis for comparison validators.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propcheck.core.models import MemberDescriptor
from propcheck.core.validators import (
    COMPARISON_PROPERTY,
    COMPARISON_VALUE,
    RULES,
    Comparison,
    ComparisonBinding,
    ComparisonValidator,
    MessageFormatter,
    NotNullValidator,
    PropertyValidatorContext,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    not_equal,
)


@dataclass
class Range:
    min: int | None
    max: int | None


def context_for(value, instance=None, name="value"):
    return PropertyValidatorContext(instance, value, property_name=name)


class TestComparisonValidator:
    """Tests for ComparisonValidator"""

    def test_greater_than_constant_fails(self):
        """Test GreaterThan(10) rejects 5 and reports the target"""
        validator = greater_than(10)
        context = context_for(5)

        assert validator.is_valid(context) is False
        assert context.message_formatter.placeholder_values[COMPARISON_VALUE] == 10
        assert context.message_formatter.placeholder_values[COMPARISON_PROPERTY] == ""

    def test_greater_than_constant_passes(self):
        """Test GreaterThan(10) accepts 15 without touching the formatter"""
        validator = greater_than(10)
        context = context_for(15)

        assert validator.is_valid(context) is True
        assert context.message_formatter.placeholder_values == {}

    def test_equal_to_projection_passes(self, sample_range):
        """Test Equal(instance.max) accepts the instance's own max"""
        validator = equal(ComparisonBinding.projection(lambda r: r.max, "max", "Max"))

        for instance in (sample_range, Range(min=0, max=-3), Range(min=None, max=99)):
            assert validator.is_valid(context_for(instance.max, instance)) is True

    def test_less_than_or_equal_none_passes(self):
        """Test an absent value passes regardless of the target"""
        assert less_than_or_equal(0).is_valid(context_for(None)) is True

    def test_not_equal_string_fails(self):
        """Test NotEqual("A") rejects "A" """
        assert not_equal("A").is_valid(context_for("A")) is False
        assert not_equal("A").is_valid(context_for("B")) is True

    @pytest.mark.parametrize("kind", list(Comparison))
    def test_none_value_never_resolves_target(self, kind):
        """Test the projection is not invoked when the value is absent"""
        def explode(instance):
            raise AssertionError("projection must not be invoked")

        validator = ComparisonValidator(kind, ComparisonBinding.comparable_projection(explode))
        assert validator.is_valid(context_for(None, instance=object())) is True

    @pytest.mark.parametrize("factory", list(RULES.values()))
    def test_none_constant_rejected(self, factory):
        """Test every rule refuses a None constant at construction"""
        with pytest.raises(ValueError, match="must not be None"):
            factory(None)

    @pytest.mark.parametrize("kind, factory", list(RULES.items()))
    def test_factories_fix_kind(self, kind, factory):
        """Test each factory returns a validator of its own kind"""
        validator = factory(1)
        assert validator.comparison is kind
        assert validator.rule_type == kind.value

    def test_projection_resolution_uses_instance(self):
        """Test get_comparison_value returns the projection output, not a constant"""
        validator = less_than(ComparisonBinding.projection(lambda r: r.max))
        context = context_for(3, Range(min=3, max=8))

        assert validator.get_comparison_value(context) == 8
        assert validator.value_to_compare is None

    def test_failure_reports_target_and_display_name(self):
        """Test failure arguments carry the resolved target and member display name"""
        validator = greater_than(
            ComparisonBinding.projection(lambda r: r.min, MemberDescriptor.from_path("min"), "Minimum")
        )
        context = context_for(1, Range(min=5, max=10), name="max")

        assert validator.is_valid(context) is False
        values = context.message_formatter.placeholder_values
        assert values[COMPARISON_VALUE] == 5
        assert values[COMPARISON_PROPERTY] == "Minimum"

    @pytest.mark.parametrize("kind, expected", [
        (Comparison.EQUAL, False),
        (Comparison.NOT_EQUAL, True),
        (Comparison.LESS_THAN, False),
        (Comparison.GREATER_THAN, True),
        (Comparison.GREATER_THAN_OR_EQUAL, True),
        (Comparison.LESS_THAN_OR_EQUAL, False),
    ])
    def test_projection_returning_none_orders_below_value(self, kind, expected):
        """Test a None target orders below any present value"""
        validator = ComparisonValidator(
            kind, ComparisonBinding.projection(lambda i: i["limit"], "limit", "Limit")
        )
        context = context_for("A", {"limit": None})

        assert validator.is_valid(context) is expected
        values = context.message_formatter.placeholder_values
        if expected:
            assert values == {}
        else:
            assert values[COMPARISON_VALUE] is None
            assert values[COMPARISON_PROPERTY] == "Limit"

    def test_none_target_renders_empty(self):
        """Test a failed comparison against None renders an empty value"""
        context = PropertyValidatorContext({"limit": None}, 3, property_name="qty", display_name="Qty")
        failures = less_than(ComparisonBinding.projection(lambda i: i["limit"])).validate(context)

        assert failures[0].error_message == "'Qty' must be less than ''."
        assert failures[0].comparison_value is None

    def test_nan_follows_python_float_semantics(self):
        """Test NaN is unordered: only not_equal accepts it"""
        nan = float("nan")

        assert equal(nan).is_valid(context_for(nan)) is False
        assert not_equal(nan).is_valid(context_for(nan)) is True
        assert greater_than(0).is_valid(context_for(nan)) is False
        assert less_than_or_equal(0).is_valid(context_for(nan)) is False

    def test_validator_is_immutable(self):
        """Test configuration cannot be changed after construction"""
        validator = greater_than(10)

        with pytest.raises(AttributeError):
            validator._binding = ComparisonBinding.constant(0)
        with pytest.raises(AttributeError):
            validator.extra = 1
        assert validator.value_to_compare == 10

    def test_concurrent_checks_are_isolated(self):
        """Test one validator shared across threads keeps each context's arguments separate"""
        validator = less_than(ComparisonBinding.projection(lambda i: i["limit"], "limit", "Limit"))
        cases = [(value, limit) for value in range(20) for limit in range(0, 40, 3)]

        def check(case):
            value, limit = case
            context = context_for(value, {"limit": limit})
            return case, validator.is_valid(context), context.message_formatter.placeholder_values

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(check, cases))

        for (value, limit), passed, values in results:
            assert passed is (value < limit)
            if passed:
                assert values == {}
            else:
                assert values == {COMPARISON_VALUE: limit, COMPARISON_PROPERTY: "Limit"}

    def test_heterogeneous_projection(self):
        """Test comparing a date against a date pulled from another type"""
        @dataclass
        class Season:
            closes: date

        @dataclass
        class Stay:
            season: Season
            end: date

        validator = less_than_or_equal(
            ComparisonBinding.comparable_projection(lambda s: s.season.closes, "season.closes", "Season Close")
        )
        stay = Stay(season=Season(closes=date(2025, 9, 30)), end=date(2025, 10, 2))

        context = context_for(stay.end, stay, name="end")
        assert validator.is_valid(context) is False
        assert context.message_formatter.placeholder_values[COMPARISON_VALUE] == date(2025, 9, 30)
        assert validator.member_to_compare.path == "season.closes"

    def test_incomparable_types_raise(self):
        """Test values that cannot be ordered raise TypeError"""
        with pytest.raises(TypeError, match="less_than"):
            less_than(5).is_valid(context_for("five"))

    def test_metadata_accessors(self):
        """Test introspection accessors"""
        validator = greater_than_or_equal(18)
        assert validator.comparison is Comparison.GREATER_THAN_OR_EQUAL
        assert validator.value_to_compare == 18
        assert validator.member_to_compare is None
        assert validator.binding.value_to_compare == 18

    def test_kind_accepts_strings(self):
        """Test the comparison kind may be given by name"""
        assert ComparisonValidator("GreaterThan", 1).comparison is Comparison.GREATER_THAN

    def test_idempotent(self):
        """Test repeated checks on equal contexts give equal results"""
        validator = less_than(ComparisonBinding.projection(lambda r: r.min, "min", "Min"))
        instance = Range(min=2, max=9)

        first = validator.validate(context_for(9, instance, name="max"))
        second = validator.validate(context_for(9, instance, name="max"))

        assert first == second
        assert len(first) == 1

    def test_validate_renders_message(self):
        """Test validate() builds a failure with a rendered message"""
        context = PropertyValidatorContext(None, 5, property_name="age", display_name="Age")
        failures = greater_than(10).validate(context, rule_name="age_gt", severity="warning")

        assert len(failures) == 1
        failure = failures[0]
        assert failure.error_message == "'Age' must be greater than '10'."
        assert failure.error_code == "greater_than"
        assert failure.attempted_value == 5
        assert failure.rule_name == "age_gt"
        assert failure.severity == "warning"
        assert failure.comparison_value == 10
        assert failure.comparison_property == ""

    def test_custom_message(self):
        """Test a message override replaces the default template"""
        validator = less_than(
            ComparisonBinding.projection(lambda r: r.max, "max", "Max"),
            message="{PropertyName} ({PropertyValue}) must stay below {ComparisonProperty}",
        )
        context = PropertyValidatorContext(Range(min=12, max=10), 12, property_name="min", display_name="Min")

        failures = validator.validate(context)
        assert failures[0].error_message == "Min (12) must stay below Max"

    def test_validate_passing_returns_no_failures(self):
        """Test validate() returns an empty list on success"""
        assert equal("A").validate(context_for("A")) == []

    @given(st.integers(), st.integers())
    def test_property_constant_rules_match_relations(self, value, target):
        """Property test: constant rules agree with Python's ordering"""
        assert equal(target).is_valid(context_for(value)) == (value == target)
        assert not_equal(target).is_valid(context_for(value)) == (value != target)
        assert less_than(target).is_valid(context_for(value)) == (value < target)
        assert greater_than(target).is_valid(context_for(value)) == (value > target)
        assert greater_than_or_equal(target).is_valid(context_for(value)) == (value >= target)
        assert less_than_or_equal(target).is_valid(context_for(value)) == (value <= target)


class TestNotNullValidator:
    """Tests for NotNullValidator"""

    def test_present_value_passes(self):
        """Test validation passes for present value"""
        assert NotNullValidator().is_valid(context_for("John Doe")) is True

    def test_none_fails(self):
        """Test validation fails for None"""
        context = PropertyValidatorContext(None, None, property_name="name", display_name="Name")
        failures = NotNullValidator().validate(context)

        assert len(failures) == 1
        assert failures[0].error_message == "'Name' must not be empty."
        assert failures[0].error_code == "not_null"

    def test_blank_string_allowed_by_default(self):
        """Test blank strings pass unless disallowed"""
        assert NotNullValidator().is_valid(context_for("   ")) is True

    def test_blank_string_rejected_when_configured(self):
        """Test blank strings fail with allow_empty_string=False"""
        assert NotNullValidator(allow_empty_string=False).is_valid(context_for("   ")) is False

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty, non-whitespace string should pass"""
        assert NotNullValidator(allow_empty_string=False).is_valid(context_for(value)) is True


class TestMessageFormatter:
    """Tests for MessageFormatter"""

    def test_build_message(self):
        """Test placeholders are replaced with argument values"""
        formatter = MessageFormatter()
        formatter.append_property_name("End Date").append_argument("ComparisonValue", date(2025, 1, 1))

        message = formatter.build_message("'{PropertyName}' must be greater than '{ComparisonValue}'.")
        assert message == "'End Date' must be greater than '2025-01-01'."

    def test_unknown_placeholder_left_intact(self):
        """Test placeholders without arguments are not replaced"""
        assert MessageFormatter().build_message("{Missing} stays") == "{Missing} stays"

    def test_placeholder_values_is_a_copy(self):
        """Test callers cannot mutate the formatter's arguments"""
        formatter = MessageFormatter().append_argument("A", 1)
        formatter.placeholder_values["A"] = 2
        assert formatter.placeholder_values == {"A": 1}
