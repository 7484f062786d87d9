"""
Value kinds and their string conversion.

Every field value is classified into a :class:`ValueKind` before it is
converted. Only ``TEXT``, ``INTEGER`` and ``BOOLEAN`` have a query-string
representation; ``UNSUPPORTED`` always fails conversion.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import UnsupportedValueKindError

if TYPE_CHECKING:
    from .options import ConversionOptions


class ValueKind(str, Enum):
    """Discriminant of a field value."""

    TEXT = "text"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    UNSUPPORTED = "unsupported"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*."""
    # bool subclasses int, so it has to be tested first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.UNSUPPORTED


def to_query_value(
    value: Any,
    options: ConversionOptions,
    field_name: str | None = None,
) -> str | None:
    """
    Convert *value* to its query-string form.

    Args:
        value: The runtime value of a record field.
        options: Resolved conversion options.
        field_name: Used for error context only.

    Returns:
        The string form, or ``None`` when skip-empty suppresses the value.

    Raises:
        UnsupportedValueKindError: If the value is neither text, integer
            nor boolean.
    """
    kind = classify(value)

    if kind is ValueKind.TEXT:
        text = str.__str__(value)
        if options.skip_empty and text == "":
            return None
        return text

    if kind is ValueKind.INTEGER:
        number = int(value)
        if options.skip_empty and number == 0:
            return None
        return str(number)

    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"

    raise UnsupportedValueKindError(kind, type(value).__name__, field_name)
