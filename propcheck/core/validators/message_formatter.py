"""
MessageFormatter - collects named arguments and renders message templates.
"""

import re
from typing import Any

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class MessageFormatter:
    """
    Renders templates such as "'{PropertyName}' must be less than '{ComparisonValue}'."

    Validators append named arguments while checking; the rule engine renders
    the final message. Placeholders without a matching argument are left as-is.
    """

    PROPERTY_NAME = "PropertyName"
    PROPERTY_VALUE = "PropertyValue"

    def __init__(self):
        self._placeholder_values: dict[str, Any] = {}

    def append_argument(self, name: str, value: Any) -> "MessageFormatter":
        """Add a named argument, replacing any previous value."""
        self._placeholder_values[name] = value
        return self

    def append_property_name(self, name: str) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_NAME, name)

    def append_property_value(self, value: Any) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_VALUE, value)

    @property
    def placeholder_values(self) -> dict[str, Any]:
        """Copy of the arguments appended so far."""
        return dict(self._placeholder_values)

    def build_message(self, template: str) -> str:
        """
        Replace every {Name} placeholder with its argument.

        Args:
            template: Message template

        Returns:
            The rendered message
        """
        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key not in self._placeholder_values:
                return match.group(0)
            value = self._placeholder_values[key]
            return "" if value is None else str(value)

        return _PLACEHOLDER.sub(replace, template)
