"""
QueryStringSerializer — record -> form-urlencoded query string.

Two calling conventions share one conversion pass:

- permissive (:func:`stringify`): unannotated fields and values without a
  string form are dropped;
- strict (:func:`stringify_strict`): the first such field raises and no
  string is produced.
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import MissingAnnotationError, UnsupportedValueKindError
from .fields import DEFAULT_TAG, FieldRegistry, describe
from .kinds import to_query_value
from .options import resolve_options
from .query import AccumulatedQuery

logger = logging.getLogger("query_stringify.serializer")


class QueryStringSerializer:
    """
    Serialise annotated records into query strings.

    Usage::

        @dataclass
        class Greeting:
            westeros: str = query_field("world")
            year: int = query_field("decade")

        serializer = QueryStringSerializer()
        serializer.stringify(Greeting("hello", 1230))
        # "decade=1230&world=hello"
    """

    def __init__(
        self,
        registry: FieldRegistry | None = None,
        *,
        tag: str = DEFAULT_TAG,
    ) -> None:
        """
        Initialize QueryStringSerializer.

        Args:
            registry: Explicit field bindings, consulted before dataclass
                and pydantic introspection.
            tag: Metadata key holding the query key in dataclass field
                metadata and pydantic ``json_schema_extra``.
        """
        self._registry = registry
        self._tag = tag

    def collect(
        self,
        record: Any,
        *options: object,
        strict: bool = False,
    ) -> AccumulatedQuery:
        """
        Gather the record's key/value pairs without encoding them.

        Raises:
            MissingAnnotationError: Strict mode, a field has no query key.
            UnsupportedValueKindError: Strict mode, a value has no string form.
            UnsupportedRecordError: *record* is not introspectable.
        """
        resolved = resolve_options(options)
        query = AccumulatedQuery()

        for descriptor in describe(record, self._registry, tag=self._tag):
            if descriptor.key is None:
                if strict:
                    raise MissingAnnotationError(descriptor.name)
                logger.debug("Skipping unannotated field %r", descriptor.name)
                continue

            try:
                value = to_query_value(descriptor.value, resolved, descriptor.name)
            except UnsupportedValueKindError as exc:
                if strict:
                    raise
                logger.debug("Skipping field: %s", exc)
                continue

            if value is not None:
                query.add(descriptor.key, value)

        return query

    def stringify(self, record: Any, *options: object) -> str:
        """Permissive conversion; problem fields are left out."""
        return self.collect(record, *options).encode()

    def stringify_strict(self, record: Any, *options: object) -> str:
        """
        Strict conversion; every field must be annotated and convertible.

        Raises:
            MissingAnnotationError: A field has no query key.
            UnsupportedValueKindError: A value is neither text, integer
                nor boolean.
        """
        return self.collect(record, *options, strict=True).encode()


def collect(
    record: Any,
    *options: object,
    strict: bool = False,
    registry: FieldRegistry | None = None,
) -> AccumulatedQuery:
    """Module-level shortcut for :meth:`QueryStringSerializer.collect`."""
    return QueryStringSerializer(registry).collect(record, *options, strict=strict)


def stringify(
    record: Any,
    *options: object,
    registry: FieldRegistry | None = None,
) -> str:
    """
    Transform a record into a query string, skipping problem fields.

    Example::

        @dataclass
        class S:
            westeros: str = query_field("world")

        stringify(S("hello"))  # "world=hello"

    Unannotated fields and unsupported values are ignored. Use
    :func:`stringify_strict` to make sure every field is used.
    """
    return QueryStringSerializer(registry).stringify(record, *options)


def stringify_strict(
    record: Any,
    *options: object,
    registry: FieldRegistry | None = None,
) -> str:
    """
    Transform a record into a query string, failing on the first problem.

    Raises:
        MissingAnnotationError: A field has no query key.
        UnsupportedValueKindError: A value has no string conversion.
    """
    return QueryStringSerializer(registry).stringify_strict(record, *options)
