"""
ValidationRule model representing a configurable rule applied to one property.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

RULE_TYPES = (
    "not_null",
    "equal",
    "not_equal",
    "less_than",
    "greater_than",
    "greater_than_or_equal",
    "less_than_or_equal",
)


def normalize_rule_type(rule_type: Any) -> str:
    """
    Map any accepted spelling of a rule type to its canonical form.

    Accepts "greater_than", "GREATER_THAN", "GreaterThan" or "greater-than".

    Raises:
        ValueError: If the name does not identify a known rule type
    """
    key = str(rule_type).strip().replace("-", "").replace("_", "").lower()
    for known in RULE_TYPES:
        if key == known.replace("_", ""):
            return known
    raise ValueError(f"Unknown rule type '{rule_type}'. Must be one of: {', '.join(RULE_TYPES)}")


class ValidationRule(BaseModel):
    """
    A configurable rule applied to one property of the validated instance.

    Attributes:
        rule_name: Human-readable name ("end_date_after_start")
        rule_type: "not_null" or one of the six comparison kinds
        field_name: Dotted path of the property this rule applies to
        parameters: Rule-specific params (e.g., {"value": 10} or {"compare_to": "start_date"})
        enabled: Whether rule is active
        severity: "error" (fails the instance) or "warning" (reported only)
        message: Optional message template overriding the rule's default
        display_name: Optional label used for the property in messages
    """

    rule_name: str = Field(..., min_length=1)
    rule_type: str
    field_name: str = Field(..., min_length=1)
    parameters: dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True
    severity: Literal["error", "warning"] = "error"
    message: str | None = None
    display_name: str | None = None

    @field_validator('rule_type', mode='before')
    @classmethod
    def check_rule_type(cls, v):
        return normalize_rule_type(v)

    @field_validator('parameters', mode='before')
    @classmethod
    def default_parameters(cls, v):
        """Treat a missing params block as empty."""
        return v or {}

    class Config:
        json_schema_extra = {
            "example": {
                "rule_name": "end_date_after_start",
                "rule_type": "greater_than",
                "field_name": "end_date",
                "parameters": {"compare_to": "start_date"},
                "enabled": True,
                "severity": "error"
            }
        }
