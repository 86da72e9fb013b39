"""
NotNullValidator - ensures a property is present and not null/empty.
"""

from .base_validator import PropertyValidator, PropertyValidatorContext


class NotNullValidator(PropertyValidator):
    """
    Validates that a property value is present.

    Fails if:
    - Property value is None (missing properties are extracted as None)
    - Property value is a blank string (unless allow_empty_string is set)
    """

    __slots__ = ("_allow_empty_string",)

    def __init__(self, allow_empty_string: bool = True, message: str | None = None):
        super().__init__(message)
        object.__setattr__(self, "_allow_empty_string", allow_empty_string)

    @property
    def allow_empty_string(self) -> bool:
        return self._allow_empty_string

    def is_valid(self, context: PropertyValidatorContext) -> bool:
        value = context.property_value

        if value is None:
            return False

        if not self.allow_empty_string and isinstance(value, str) and value.strip() == "":
            return False

        return True

    @property
    def rule_type(self) -> str:
        return "not_null"

    @property
    def default_message_template(self) -> str:
        return "'{PropertyName}' must not be empty."
