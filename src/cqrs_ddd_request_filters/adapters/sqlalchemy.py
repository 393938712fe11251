"""
SQLAlchemyQueryBuilder: compile the predicate tree into a ``Select``.

Fields resolve against the column attributes of a mapped class or a ``Table``
(``table.c``). Sibling nodes fold left to right, each one joined to the
accumulated expression with its own combinator, so ``a AND b OR c`` reads
as ``(a AND b) OR c``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, asc, desc, func, inspect, or_, select

from ..exceptions import FieldNotAllowedError
from ..operators import Combinator, SortDirection, WhereOperator
from ..ports import IQueryBuilder
from ..wheres import CollectionWhere, Where

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from sqlalchemy import ColumnElement, Select

    from ..wheres import BaseWhere

logger = logging.getLogger("cqrs_ddd.request_filters.adapters")


def _find_in_set(column: Any, value: Any) -> ColumnElement[bool]:
    return func.find_in_set(_set_member(value), column) > 0


def _not_find_in_set(column: Any, value: Any) -> ColumnElement[bool]:
    return func.find_in_set(_set_member(value), column) == 0


def _set_member(value: Any) -> Any:
    return value.name if isinstance(value, Enum) else value


_OPERATORS: dict[WhereOperator, Callable[[Any, Any], ColumnElement[bool]]] = {
    WhereOperator.EQUAL: lambda c, v: c == v,
    WhereOperator.DIFF: lambda c, v: c != v,
    WhereOperator.LESS: lambda c, v: c < v,
    WhereOperator.LESS_OR_EQUAL: lambda c, v: c <= v,
    WhereOperator.GREATER: lambda c, v: c > v,
    WhereOperator.GREATER_OR_EQUAL: lambda c, v: c >= v,
    WhereOperator.LIKE: lambda c, v: c.like(v),
    WhereOperator.IN: lambda c, v: c.in_(list(v)),
    WhereOperator.NOT_IN: lambda c, v: c.not_in(list(v)),
    WhereOperator.IS_NULL: lambda c, _v: c.is_(None),
    WhereOperator.IS_NOT_NULL: lambda c, _v: c.is_not(None),
    WhereOperator.FIND_IN_SET: _find_in_set,
    WhereOperator.NOT_FIND_IN_SET: _not_find_in_set,
}


class SQLAlchemyQueryBuilder(IQueryBuilder):
    """Accumulates compiled criteria and ordering for one selectable."""

    def __init__(self, source: Any) -> None:
        self._source = source
        self._nodes: list[BaseWhere] = []
        self._orders: list[Any] = []

    def where(self, node: BaseWhere) -> SQLAlchemyQueryBuilder:
        self._nodes.append(node)
        return self

    def order_by(self, field: str, direction: SortDirection) -> SQLAlchemyQueryBuilder:
        column = self._column(field)
        descending = direction is SortDirection.DESC
        self._orders.append(desc(column) if descending else asc(column))
        return self

    def criteria(self) -> ColumnElement[bool] | None:
        """The combined WHERE expression, or ``None`` without predicates."""
        return self._fold(self._nodes)

    def statement(self, stmt: Select[Any] | None = None) -> Select[Any]:
        """Apply criteria and ordering to *stmt* (default ``select(source)``)."""
        stmt = stmt if stmt is not None else select(self._source)
        criteria = self.criteria()
        if criteria is not None:
            stmt = stmt.where(criteria)
        if self._orders:
            stmt = stmt.order_by(*self._orders)
        return stmt

    # -- compilation ---------------------------------------------------------

    def _fold(self, nodes: Sequence[BaseWhere]) -> ColumnElement[bool] | None:
        result: ColumnElement[bool] | None = None
        for node in nodes:
            expr = self._compile(node)
            if expr is None:
                continue
            if result is None:
                result = expr
            elif node.combinator is Combinator.OR:
                result = or_(result, expr)
            else:
                result = and_(result, expr)
        return result

    def _compile(self, node: BaseWhere) -> ColumnElement[bool] | None:
        if isinstance(node, CollectionWhere):
            inner = self._fold(node.children)
            return inner.self_group() if inner is not None else None
        return self._compile_leaf(node)

    def _compile_leaf(self, node: Where) -> ColumnElement[bool]:
        column = self._column(node.field)
        return _OPERATORS[node.operator](column, node.value)

    def _column(self, field: str) -> Any:
        column: Any = None
        if not isinstance(self._source, type):
            column = self._source.c.get(field)
        elif field in inspect(self._source).column_attrs:
            column = getattr(self._source, field)
        if column is None:
            logger.warning("Field %r does not resolve to a column", field)
            raise FieldNotAllowedError(
                f"Field {field!r} is not a column of {self._source!r}", field=field
            )
        return column
