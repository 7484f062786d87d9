"""Tests for exceptions module."""

from __future__ import annotations

from query_stringify import (
    MissingAnnotationError,
    QueryStringError,
    UnsupportedRecordError,
    UnsupportedValueKindError,
    ValueKind,
)


def test_hierarchy() -> None:
    assert issubclass(MissingAnnotationError, QueryStringError)
    assert issubclass(UnsupportedValueKindError, QueryStringError)
    assert issubclass(UnsupportedRecordError, QueryStringError)
    assert issubclass(UnsupportedRecordError, TypeError)


def test_missing_annotation_message_and_dict() -> None:
    err = MissingAnnotationError("westeros")
    assert str(err) == "missing query annotation for field 'westeros'"
    assert err.to_dict() == {
        "error": "MISSING_ANNOTATION",
        "message": str(err),
        "field": "westeros",
    }


def test_unsupported_kind_message_and_dict() -> None:
    err = UnsupportedValueKindError(ValueKind.UNSUPPORTED, "complex", "westeros")
    assert str(err) == "unsupported kind 'complex' for field 'westeros'"
    d = err.to_dict()
    assert d["error"] == "UNSUPPORTED_VALUE_KIND"
    assert d["kind"] == "unsupported"
    assert d["type"] == "complex"
    assert d["field"] == "westeros"


def test_unsupported_kind_without_field() -> None:
    err = UnsupportedValueKindError(ValueKind.UNSUPPORTED, "float")
    assert str(err) == "unsupported kind 'float'"
    assert err.to_dict()["field"] is None


def test_unsupported_record() -> None:
    err = UnsupportedRecordError(42)
    assert err.type_name == "int"
    assert "'int'" in str(err)
    assert err.to_dict()["error"] == "UNSUPPORTED_RECORD"


def test_base_to_dict() -> None:
    err = QueryStringError("boom")
    assert err.to_dict() == {"error": "QueryStringError", "message": "boom"}
