"""
Member access helpers used by the rule engine to read property values.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def get_member_value(instance: Any, path: str) -> Any:
    """
    Read a dotted member path from a mapping or an object.

    Args:
        instance: Mapping or object to read from
        path: Dotted path ("booking.start_date")

    Returns:
        The member value, or None if any segment is missing
    """
    current = instance
    for segment in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(segment)
        else:
            current = getattr(current, segment, None)
    return current


def member_accessor(path: str) -> Callable[[Any], Any]:
    """Return a function reading the given member path from an instance."""
    def accessor(instance: Any) -> Any:
        return get_member_value(instance, path)

    accessor.__name__ = f"get_{path.replace('.', '_')}"
    return accessor


def humanize_member_name(path: str) -> str:
    """
    Turn a member path into a display name.

    Examples:
        >>> humanize_member_name("start_date")
        'Start Date'
        >>> humanize_member_name("booking.maxGuests")
        'Max Guests'
    """
    name = path.rsplit(".", 1)[-1]
    words = _CAMEL_BOUNDARY.sub(" ", name).replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)
