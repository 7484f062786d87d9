"""Tests for AccumulatedQuery."""

from __future__ import annotations

from query_stringify import AccumulatedQuery


def test_empty_query() -> None:
    query = AccumulatedQuery()
    assert query.encode() == ""
    assert not query
    assert len(query) == 0
    assert query.to_dict() == {}


def test_encode_sorts_keys() -> None:
    query = AccumulatedQuery()
    query.add("world", "hello")
    query.add("decade", "1230")
    assert query.encode() == "decade=1230&world=hello"
    assert list(query) == ["decade", "world"]


def test_multiple_values_keep_insertion_order() -> None:
    query = AccumulatedQuery()
    query.add("k", "b")
    query.add("a", "1")
    query.add("k", "a")
    assert query.encode() == "a=1&k=b&k=a"
    assert query.get("k") == ["b", "a"]
    assert len(query) == 2


def test_keys_and_values_are_percent_encoded() -> None:
    query = AccumulatedQuery()
    query.add("a key", "x/y=z")
    query.add("safe", "A-z_0.9~")
    assert query.encode() == "a+key=x%2Fy%3Dz&safe=A-z_0.9~"


def test_empty_value_keeps_key() -> None:
    query = AccumulatedQuery()
    query.add("world", "")
    assert query.encode() == "world="
    assert "world" in query


def test_get_returns_copy() -> None:
    query = AccumulatedQuery()
    query.add("k", "v")
    query.get("k").append("other")
    query.get("missing").append("other")
    assert query.to_dict() == {"k": ["v"]}
