"""Query builder adapters implementing ``IQueryBuilder``."""

from __future__ import annotations

from .memory import InMemoryQueryBuilder

__all__ = ["InMemoryQueryBuilder"]
