"""
Query-string exception hierarchy.

All exceptions inherit from ``QueryStringError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .kinds import ValueKind


class QueryStringError(Exception):
    """Base exception for all query-string serialization errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class MissingAnnotationError(QueryStringError):
    """A record field carries no query-key annotation.

    Skipped by permissive conversion, raised by strict conversion.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"missing query annotation for field {field_name!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_ANNOTATION",
            "message": str(self),
            "field": self.field_name,
        }


class UnsupportedValueKindError(QueryStringError):
    """
    A field value has no string conversion.

    Only text, integer and boolean values convert; everything else
    (floats, ``None``, containers, nested records, ...) lands here.
    """

    def __init__(
        self,
        kind: ValueKind,
        type_name: str,
        field_name: str | None = None,
    ) -> None:
        self.kind = kind
        self.type_name = type_name
        self.field_name = field_name

        message = f"unsupported kind {type_name!r}"
        if field_name is not None:
            message += f" for field {field_name!r}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_VALUE_KIND",
            "message": str(self),
            "kind": self.kind.value,
            "type": self.type_name,
            "field": self.field_name,
        }


class UnsupportedRecordError(QueryStringError, TypeError):
    """The value handed to a conversion is not an introspectable record."""

    def __init__(self, value: object) -> None:
        self.type_name = type(value).__name__
        super().__init__(
            f"cannot read query fields from {self.type_name!r}: expected a "
            "dataclass instance, a pydantic model or a registered type"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_RECORD",
            "message": str(self),
            "type": self.type_name,
        }
