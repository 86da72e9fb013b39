"""
Base validator interface for all property validators.

All validators inherit from PropertyValidator and implement is_valid().
"""

from abc import ABC, abstractmethod
from typing import Any

from propcheck.core.models import ValidationFailure

from .message_formatter import MessageFormatter


class PropertyValidatorContext:
    """
    Per-check input handed to a validator by the rule engine.

    Holds the instance under validation, the already-extracted property value
    and a fresh MessageFormatter. Contexts are never reused across checks.
    """

    __slots__ = ("instance_to_validate", "property_value", "property_name", "display_name", "message_formatter")

    def __init__(
        self,
        instance_to_validate: Any,
        property_value: Any,
        property_name: str = "",
        display_name: str | None = None,
    ):
        self.instance_to_validate = instance_to_validate
        self.property_value = property_value
        self.property_name = property_name
        self.display_name = display_name or property_name
        self.message_formatter = MessageFormatter()

    def __repr__(self) -> str:
        return f"PropertyValidatorContext(property={self.property_name}, value={self.property_value!r})"


class PropertyValidator(ABC):
    """
    Abstract base class for all validators.

    A validator answers one question per call: does this property value pass?
    Failing is an ordinary outcome reported through the return value, never
    through an exception. Validators keep no state between calls and cannot be
    modified after construction.
    """

    __slots__ = ("_message",)

    def __init__(self, message: str | None = None):
        """
        Initialize validator.

        Args:
            message: Optional template overriding default_message_template
        """
        object.__setattr__(self, "_message", message)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @abstractmethod
    def is_valid(self, context: PropertyValidatorContext) -> bool:
        """
        Check the property value in the context.

        Args:
            context: The check context

        Returns:
            True if valid. When False, the validator has appended its named
            arguments to context.message_formatter.
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    @property
    @abstractmethod
    def default_message_template(self) -> str:
        """Return the template used when no message override is configured."""
        pass

    @property
    def error_code(self) -> str:
        return self.rule_type

    @property
    def message_template(self) -> str:
        return self._message or self.default_message_template

    def validate(
        self,
        context: PropertyValidatorContext,
        rule_name: str | None = None,
        severity: str = "error",
    ) -> list[ValidationFailure]:
        """
        Run the check and turn a failure into a ValidationFailure.

        Args:
            context: The check context
            rule_name: Name of the configured rule, copied to the failure
            severity: Severity copied to the failure

        Returns:
            Empty list on success, a single failure otherwise
        """
        if self.is_valid(context):
            return []

        formatter = context.message_formatter
        formatter.append_property_name(context.display_name)
        formatter.append_property_value(context.property_value)

        return [
            ValidationFailure(
                property_name=context.property_name,
                error_message=formatter.build_message(self.message_template),
                attempted_value=context.property_value,
                error_code=self.error_code,
                rule_name=rule_name,
                severity=severity,
                formatted_message_placeholder_values=formatter.placeholder_values,
            )
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type})"
