"""InMemoryQueryBuilder: records predicates and ordering for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports import IQueryBuilder

if TYPE_CHECKING:
    from ..operators import SortDirection
    from ..wheres import BaseWhere


class InMemoryQueryBuilder(IQueryBuilder):
    """In-memory implementation of ``IQueryBuilder``.

    Keeps every attached node and ordering clause in call order.
    """

    def __init__(self) -> None:
        self.wheres: list[BaseWhere] = []
        self.orders: list[tuple[str, SortDirection]] = []

    def where(self, node: BaseWhere) -> InMemoryQueryBuilder:
        self.wheres.append(node)
        return self

    def order_by(self, field: str, direction: SortDirection) -> InMemoryQueryBuilder:
        self.orders.append((field, direction))
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "filters": [w.to_dict() for w in self.wheres],
            "sorts": [{"field": f, "sort": d.value} for f, d in self.orders],
        }
