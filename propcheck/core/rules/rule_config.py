"""
Rule configuration management.

Loads validation rules from YAML files and provides a builder
for assembling rule configurations in code.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from propcheck.core.models import ValidationRule, normalize_rule_type
from propcheck.core.validators import Comparison


class RuleConfigLoader:
    """
    Loads validation rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      start_date:
        - type: not_null

      end_date:
        - type: not_null
        - type: greater_than
          params:
            compare_to: start_date

      guests:
        - type: greater_than_or_equal
          params:
            value: 1
        - type: less_than_or_equal
          params:
            compare_to: room.capacity
            display_name: Room Capacity
          severity: warning
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse validation rules from YAML file.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            ValueError: If YAML is invalid or missing required fields
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise ValueError("'rules' section must map field names to rule lists")

        rules = []
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise ValueError(f"Rules for field '{field_name}' must be a list")

            for idx, rule_def in enumerate(field_rule_list):
                rules.append(self._parse_rule(field_name, rule_def, idx))

        return rules

    def _parse_rule(self, field_name: str, rule_def: dict[str, Any], idx: int) -> dict[str, Any]:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Index of this rule for the field (for naming)

        Returns:
            Parsed rule dictionary

        Raises:
            ValueError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise ValueError(f"Rule for field '{field_name}' is missing 'type'")

        try:
            rule_type = normalize_rule_type(rule_def["type"])
        except ValueError as e:
            raise ValueError(f"Invalid rule for field '{field_name}': {e}") from e
        rule_name = rule_def.get("name", f"{field_name}_{rule_type}_{idx}")

        try:
            rule = ValidationRule(
                rule_name=rule_name,
                rule_type=rule_type,
                field_name=field_name,
                parameters=rule_def.get("params", rule_def.get("parameters")),
                enabled=rule_def.get("enabled", True),
                severity=rule_def.get("severity", "error"),
                message=rule_def.get("message"),
                display_name=rule_def.get("display_name"),
            )
        except PydanticValidationError as e:
            raise ValueError(f"Invalid rule '{rule_name}': {e}") from e

        return rule.model_dump()


class RuleConfigBuilder:
    """
    Programmatically build rule configurations (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[dict[str, Any]] = []

    def add_not_null(
        self,
        field_name: str,
        allow_empty_string: bool = True,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a not-null rule."""
        self.rules.append({
            "rule_name": f"{field_name}_not_null",
            "rule_type": "not_null",
            "field_name": field_name,
            "parameters": {"allow_empty_string": allow_empty_string},
            "severity": severity,
            "enabled": True,
        })
        return self

    def add_comparison(
        self,
        field_name: str,
        comparison: Comparison | str,
        value: Any = None,
        compare_to: str | None = None,
        comparable: bool = False,
        display_name: str | None = None,
        severity: str = "error",
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """
        Add a comparison rule against a constant value or another member.

        Args:
            field_name: Property to validate
            comparison: Comparison kind
            value: Constant to compare against
            compare_to: Member path to compare against (instead of value)
            comparable: Treat compare_to as a member of a different orderable type
            display_name: Label of the compared member in messages
            severity: "error" or "warning"
            message: Template overriding the default message
        """
        kind = Comparison.from_name(comparison)

        params: dict[str, Any] = {}
        if value is not None:
            params["value"] = value
        if compare_to is not None:
            params["compare_to"] = compare_to
            if comparable:
                params["comparable"] = True
            if display_name is not None:
                params["display_name"] = display_name

        self.rules.append({
            "rule_name": f"{field_name}_{kind.value}",
            "rule_type": kind.value,
            "field_name": field_name,
            "parameters": params,
            "severity": severity,
            "enabled": True,
            "message": message,
        })
        return self

    def add_equal(self, field_name: str, value: Any = None, **kwargs) -> "RuleConfigBuilder":
        return self.add_comparison(field_name, Comparison.EQUAL, value, **kwargs)

    def add_not_equal(self, field_name: str, value: Any = None, **kwargs) -> "RuleConfigBuilder":
        return self.add_comparison(field_name, Comparison.NOT_EQUAL, value, **kwargs)

    def add_less_than(self, field_name: str, value: Any = None, **kwargs) -> "RuleConfigBuilder":
        return self.add_comparison(field_name, Comparison.LESS_THAN, value, **kwargs)

    def add_greater_than(self, field_name: str, value: Any = None, **kwargs) -> "RuleConfigBuilder":
        return self.add_comparison(field_name, Comparison.GREATER_THAN, value, **kwargs)

    def add_greater_than_or_equal(self, field_name: str, value: Any = None, **kwargs) -> "RuleConfigBuilder":
        return self.add_comparison(field_name, Comparison.GREATER_THAN_OR_EQUAL, value, **kwargs)

    def add_less_than_or_equal(self, field_name: str, value: Any = None, **kwargs) -> "RuleConfigBuilder":
        return self.add_comparison(field_name, Comparison.LESS_THAN_OR_EQUAL, value, **kwargs)

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules
