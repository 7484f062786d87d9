"""Shared fixtures for query-string tests."""

from __future__ import annotations

import pytest

from query_stringify import FieldRegistry, QueryStringSerializer


@pytest.fixture
def registry() -> FieldRegistry:
    """Empty, per-test field registry."""
    return FieldRegistry()


@pytest.fixture
def serializer() -> QueryStringSerializer:
    """Serializer with the default ``query`` tag and no registry."""
    return QueryStringSerializer()
