"""Sortable: allow-listed ordering from a ``sort`` parameter or a body list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import FieldNotAllowedError, MalformedNodeError
from .operators import SortDirection
from .requests import OrderRequest

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports import IQueryBuilder
    from .requests import IRequestSource

logger = logging.getLogger("cqrs_ddd.request_filters.sortable")


@dataclass(frozen=True)
class OrderBy:
    """Allow-list entry mapping a client-facing sort name to a query field."""

    name: str
    internal_name: str = ""

    def __post_init__(self) -> None:
        if not self.internal_name:
            object.__setattr__(self, "internal_name", self.name)


class Sortable:
    """Ordered allow-list of sortable aliases."""

    def __init__(self, *sorts: OrderBy | str, sort_param: str = "sort") -> None:
        self.allowed_sorts: list[OrderBy] = []
        self.sort_param = sort_param
        self.add_sorts(*sorts)

    def add_sorts(self, *sorts: OrderBy | str) -> Sortable:
        for sort in sorts:
            self.allowed_sorts.append(OrderBy(sort) if isinstance(sort, str) else sort)
        return self

    def apply(self, builder: IQueryBuilder, source: IRequestSource) -> None:
        """Apply ``sort=country,-age`` style ordering."""
        raw = source.find_parameter(self.sort_param)
        if raw is None or not raw.strip():
            return
        self.apply_body(builder, self.parse(raw))

    @staticmethod
    def parse(raw: str) -> list[OrderRequest]:
        orders: list[OrderRequest] = []
        for part in raw.split(","):
            token = part.strip()
            if not token:
                continue
            if token.startswith("-"):
                orders.append(OrderRequest(field=token[1:], sort=SortDirection.DESC))
            else:
                orders.append(OrderRequest(field=token, sort=SortDirection.ASC))
        return orders

    def apply_body(
        self, builder: IQueryBuilder, orders: Iterable[OrderRequest]
    ) -> None:
        # Resolve everything first so a bad field emits nothing
        resolved = [self._resolve(order) for order in orders]
        for internal_name, direction in resolved:
            logger.debug("Ordering by %s %s", internal_name, direction.value)
            builder.order_by(internal_name, direction)

    def _resolve(self, order: OrderRequest) -> tuple[str, SortDirection]:
        if order.field is None:
            raise MalformedNodeError(
                "The sort list is not valid, an element has no field"
            )
        match = next((s for s in self.allowed_sorts if s.name == order.field), None)
        if match is None:
            logger.warning("Rejected sort on field %r: not allowed", order.field)
            raise FieldNotAllowedError(
                f"The field {order.field!r} is not valid", field=order.field
            )
        return match.internal_name, order.sort
