"""
ValidationFailure model describing one failed rule for one property (ephemeral).
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ValidationFailure(BaseModel):
    """
    A single failed check, ready to be shown to an end user.

    Attributes:
        property_name: Property that failed ("end_date")
        error_message: Rendered message ("'End Date' must be greater than '2025-01-01'.")
        attempted_value: The value that failed validation
        error_code: Rule type identifier ("greater_than", "not_null")
        rule_name: Name of the configured rule that produced the failure
        severity: "error" (fails the instance) or "warning" (reported only)
        formatted_message_placeholder_values: Named arguments used to render the message
    """

    property_name: str
    error_message: str
    attempted_value: Any = None
    error_code: str
    rule_name: str | None = None
    severity: Literal["error", "warning"] = "error"
    formatted_message_placeholder_values: dict[str, Any] = Field(default_factory=dict)

    @property
    def comparison_value(self) -> Any:
        """Comparison target used by a comparison rule, if any."""
        return self.formatted_message_placeholder_values.get("ComparisonValue")

    @property
    def comparison_property(self) -> str:
        """Display name of the compared member, "" for constant comparisons."""
        return self.formatted_message_placeholder_values.get("ComparisonProperty", "")

    def __str__(self) -> str:
        return self.error_message

    class Config:
        json_schema_extra = {
            "example": {
                "property_name": "end_date",
                "error_message": "'End Date' must be greater than '2025-01-01'.",
                "attempted_value": "2024-12-31",
                "error_code": "greater_than",
                "rule_name": "end_date_greater_than",
                "severity": "error",
                "formatted_message_placeholder_values": {
                    "PropertyName": "End Date",
                    "PropertyValue": "2024-12-31",
                    "ComparisonValue": "2025-01-01",
                    "ComparisonProperty": "Start Date"
                }
            }
        }
