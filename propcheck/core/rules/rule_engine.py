"""
Rule engine for orchestrating property validators on instances.

The rule engine builds validators from rule configurations, extracts
property values, runs each validator and aggregates the failures.
"""

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from pydantic import ValidationError as PydanticValidationError

from propcheck.core.models import ValidationFailure, ValidationResult, ValidationRule
from propcheck.core.validators import (
    Comparison,
    ComparisonBinding,
    ComparisonValidator,
    NotNullValidator,
    PropertyValidator,
    PropertyValidatorContext,
)
from propcheck.observability.logger import get_logger, log_operation
from propcheck.observability.metrics import (
    record_rule_evaluation,
    track_duration,
    validation_duration_seconds,
)

from .accessor import humanize_member_name, member_accessor

logger = get_logger(__name__)


class PropertyRule(NamedTuple):
    """A validator bound to one property."""

    rule_name: str
    field_name: str
    display_name: str
    severity: str
    validator: PropertyValidator
    accessor: Callable[[Any], Any]


def _build_not_null(rule: ValidationRule) -> PropertyValidator:
    return NotNullValidator(
        allow_empty_string=rule.parameters.get("allow_empty_string", True),
        message=rule.message,
    )


def _build_comparison(rule: ValidationRule) -> PropertyValidator:
    params = rule.parameters
    has_value = params.get("value") is not None
    compare_to = params.get("compare_to")

    if has_value and compare_to:
        raise ValueError("Comparison rules take either 'value' or 'compare_to', not both")
    if not has_value and not compare_to:
        raise ValueError("Comparison rules require 'value' or 'compare_to'")

    if has_value:
        target = ComparisonBinding.constant(params["value"])
    else:
        display_name = params.get("display_name") or humanize_member_name(compare_to)
        factory = ComparisonBinding.comparable_projection if params.get("comparable") else ComparisonBinding.projection
        target = factory(member_accessor(compare_to), compare_to, display_name)

    return ComparisonValidator(Comparison.from_name(rule.rule_type), target, rule.message)


class RuleEngine:
    """
    Orchestrates property validators on instances.

    Builds validators from rule configurations and applies them in order,
    collecting all validation failures.
    """

    VALIDATOR_REGISTRY: dict[str, Callable[[ValidationRule], PropertyValidator]] = {
        "not_null": _build_not_null,
        **{kind.value: _build_comparison for kind in Comparison},
    }

    def __init__(self, rules: Iterable[dict[str, Any] | ValidationRule] = ()):
        """
        Initialize the rule engine with validation rules.

        Args:
            rules: Rule configurations (dicts or ValidationRule), each containing:
                   - rule_name: str
                   - rule_type: str (not_null or a comparison kind)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional)
                   - severity: str (error or warning)
                   - enabled: bool (default True)
        """
        self.rules: list[PropertyRule] = []
        for rule in rules:
            self._build_rule(rule)

    def _build_rule(self, rule: dict[str, Any] | ValidationRule) -> None:
        """Build a validator instance from one rule configuration."""
        if isinstance(rule, dict):
            try:
                rule = ValidationRule(**rule)
            except PydanticValidationError as e:
                raise ValueError(f"Invalid rule configuration {rule.get('rule_name')!r}: {e}") from e

        if not rule.enabled:
            logger.debug(f"Skipping disabled rule {rule.rule_name}")
            return

        builder = self.VALIDATOR_REGISTRY.get(rule.rule_type)
        if not builder:
            raise ValueError(f"Unknown rule type: {rule.rule_type}")

        try:
            validator = builder(rule)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Failed to create validator for rule '{rule.rule_name}': {e}") from e

        self.add_rule(
            rule.field_name,
            validator,
            rule_name=rule.rule_name,
            severity=rule.severity,
            display_name=rule.display_name,
        )

    def add_rule(
        self,
        field_name: str,
        validator: PropertyValidator,
        rule_name: str | None = None,
        severity: str = "error",
        display_name: str | None = None,
    ) -> "RuleEngine":
        """
        Bind a validator to a property.

        Args:
            field_name: Dotted path of the property to validate
            validator: The validator to run
            rule_name: Name reported in results (default: "<field>_<rule_type>")
            severity: "error" or "warning"
            display_name: Label used for the property in messages

        Returns:
            The engine, for chaining
        """
        if severity not in ("error", "warning"):
            raise ValueError(f"Invalid severity '{severity}'. Must be 'error' or 'warning'")

        rule = PropertyRule(
            rule_name=rule_name or f"{field_name}_{validator.rule_type}",
            field_name=field_name,
            display_name=display_name or humanize_member_name(field_name),
            severity=severity,
            validator=validator,
            accessor=member_accessor(field_name),
        )
        self.rules.append(rule)
        logger.debug(
            f"Registered rule {rule.rule_name}",
            extra={"rule_name": rule.rule_name, "rule_type": validator.rule_type, "field_name": field_name},
        )
        return self

    def validate(self, instance: Any, record_id: str | None = None) -> ValidationResult:
        """
        Validate an instance against all rules.

        Args:
            instance: Object or mapping to validate
            record_id: Optional identifier copied to the result

        Returns:
            ValidationResult containing pass/fail status and failures
        """
        passed_rules: list[str] = []
        failed_rules: list[str] = []
        errors: list[ValidationFailure] = []
        warnings: list[ValidationFailure] = []

        with track_duration(validation_duration_seconds):
            for rule in self.rules:
                context = PropertyValidatorContext(
                    instance_to_validate=instance,
                    property_value=rule.accessor(instance),
                    property_name=rule.field_name,
                    display_name=rule.display_name,
                )
                failures = rule.validator.validate(context, rule_name=rule.rule_name, severity=rule.severity)
                record_rule_evaluation(rule.validator.rule_type, not failures, rule.severity)

                if not failures:
                    passed_rules.append(rule.rule_name)
                    continue

                for failure in failures:
                    logger.debug(
                        f"Rule {rule.rule_name} failed: {failure.error_message}",
                        extra={
                            "rule_name": rule.rule_name,
                            "rule_type": rule.validator.rule_type,
                            "property_name": rule.field_name,
                            "severity": rule.severity,
                        },
                    )

                if rule.severity == "error":
                    failed_rules.append(rule.rule_name)
                    errors.extend(failures)
                else:
                    warnings.extend(failures)

        return ValidationResult(
            record_id=record_id,
            passed=not errors,
            errors=errors,
            warnings=warnings,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
        )

    def validate_batch(self, instances: Iterable[Any]) -> list[ValidationResult]:
        """
        Validate a batch of instances.

        Args:
            instances: Objects or mappings to validate

        Returns:
            List of ValidationResult objects, one per instance
        """
        instances = list(instances)
        with log_operation("Validating batch", logger=logger, batch_size=len(instances)):
            results = [self.validate(instance) for instance in instances]

        failed = sum(1 for result in results if not result.passed)
        if failed:
            logger.info(f"{failed} of {len(results)} instances failed validation")
        return results

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts and types
        """
        return {
            "total_rules": len(self.rules),
            "rules_by_type": self._count_by_type(),
            "rules_by_severity": self._count_by_severity(),
        }

    def _count_by_type(self) -> dict[str, int]:
        """Count validators by rule type."""
        counts: dict[str, int] = {}
        for rule in self.rules:
            rule_type = rule.validator.rule_type
            counts[rule_type] = counts.get(rule_type, 0) + 1
        return counts

    def _count_by_severity(self) -> dict[str, int]:
        """Count validators by severity."""
        counts: dict[str, int] = {}
        for rule in self.rules:
            counts[rule.severity] = counts.get(rule.severity, 0) + 1
        return counts
