"""
ValidationResult model representing the outcome of validating an instance (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator

from .validation_failure import ValidationFailure


class ValidationResult(BaseModel):
    """
    Outcome of validating one instance against a rule set.

    Attributes:
        record_id: Optional identifier of the validated instance
        passed: Overall validation status (no error-severity failures)
        errors: Failures with severity "error"
        warnings: Failures with severity "warning" (do not fail the instance)
        passed_rules: Names of rules that succeeded
        failed_rules: Names of error-severity rules that failed
    """

    record_id: str | None = None
    passed: bool
    errors: list[ValidationFailure] = Field(default_factory=list)
    warnings: list[ValidationFailure] = Field(default_factory=list)
    passed_rules: list[str] = Field(default_factory=list)
    failed_rules: list[str] = Field(default_factory=list)

    @field_validator('errors')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies errors is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but errors is not empty")
        return v

    @property
    def error_messages(self) -> list[str]:
        """Rendered messages of all error-severity failures."""
        return [failure.error_message for failure in self.errors]

    def __str__(self) -> str:
        return "\n".join(self.error_messages)

    class Config:
        json_schema_extra = {
            "example": {
                "record_id": "BOOKING-42",
                "passed": False,
                "errors": [
                    {
                        "property_name": "end_date",
                        "error_message": "'End Date' must be greater than '2025-01-01'.",
                        "attempted_value": "2024-12-31",
                        "error_code": "greater_than",
                        "rule_name": "end_date_greater_than",
                        "severity": "error"
                    }
                ],
                "warnings": [],
                "passed_rules": ["start_date_not_null"],
                "failed_rules": ["end_date_greater_than"]
            }
        }
