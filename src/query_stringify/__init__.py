"""Annotated records -> URL query strings, in permissive and strict modes."""

from __future__ import annotations

from .exceptions import (
    MissingAnnotationError,
    QueryStringError,
    UnsupportedRecordError,
    UnsupportedValueKindError,
)
from .fields import (
    DEFAULT_TAG,
    FieldDescriptor,
    FieldRegistry,
    QueryKey,
    describe,
    query_field,
)
from .kinds import ValueKind, classify, to_query_value
from .options import ConversionOptions, Option, SkipEmpty, resolve_options
from .query import AccumulatedQuery
from .serializer import QueryStringSerializer, collect, stringify, stringify_strict

__all__ = [
    # Entry points
    "stringify",
    "stringify_strict",
    "collect",
    "QueryStringSerializer",
    # Options
    "Option",
    "SkipEmpty",
    "ConversionOptions",
    "resolve_options",
    # Fields
    "DEFAULT_TAG",
    "QueryKey",
    "query_field",
    "FieldDescriptor",
    "FieldRegistry",
    "describe",
    # Kinds
    "ValueKind",
    "classify",
    "to_query_value",
    # Query
    "AccumulatedQuery",
    # Exceptions
    "QueryStringError",
    "MissingAnnotationError",
    "UnsupportedValueKindError",
    "UnsupportedRecordError",
]
