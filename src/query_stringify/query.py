"""AccumulatedQuery — multi-valued key/value pairs -> form-urlencoded string."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from collections.abc import Iterator


class AccumulatedQuery:
    """
    Multi-map of query keys to one or more string values.

    Values under one key keep insertion order; keys are sorted only when
    the query is encoded.

    Usage::

        query = AccumulatedQuery()
        query.add("world", "hello")
        query.add("decade", "1230")
        query.encode()  # "decade=1230&world=hello"
    """

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def add(self, key: str, value: str) -> None:
        """Append *value* under *key*."""
        self._values.setdefault(key, []).append(value)

    def get(self, key: str) -> list[str]:
        """Return a copy of the values stored under *key* (empty if absent)."""
        return list(self._values.get(key, []))

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __bool__(self) -> bool:
        return bool(self._values)

    def __repr__(self) -> str:
        return f"AccumulatedQuery({self.to_dict()!r})"

    def to_dict(self) -> dict[str, list[str]]:
        """Return the pairs as ``{key: [values]}`` with keys in sorted order."""
        return {key: list(self._values[key]) for key in sorted(self._values)}

    def encode(self) -> str:
        """
        Serialise to ``key=value`` pairs joined with ``&``.

        Keys are sorted ascending; keys and values are percent-encoded with
        ``quote_plus`` rules. An empty query encodes to ``""``.
        """
        pairs = [
            (key, value) for key in sorted(self._values) for value in self._values[key]
        ]
        return urlencode(pairs) if pairs else ""
