"""Shared fixtures for request filter tests."""

from __future__ import annotations

from typing import Any

import pytest

from cqrs_ddd_request_filters import InMemoryQueryBuilder, MappingRequest


@pytest.fixture
def builder() -> InMemoryQueryBuilder:
    """Recording query builder."""
    return InMemoryQueryBuilder()


@pytest.fixture
def params():
    """Factory for flat GET requests."""

    def _make(**values: Any) -> MappingRequest:
        return MappingRequest(values)

    return _make
