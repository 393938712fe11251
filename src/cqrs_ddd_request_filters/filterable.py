"""
Filterable: the allow-list of filters and the two ways of applying it.

Flat mode walks every allowed filter against a parameter source. Body mode
translates a ``FilterRequest`` tree node by node into ``Where`` /
``CollectionWhere`` and only ever reaches filters that are allow-listed and
safe to drive with a client-supplied operator.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import (
    FieldNotAllowedError,
    MalformedNodeError,
    UnsupportedBodyOperationError,
)
from .filters.base import Filter, apply_flat
from .filters.standard import ExactFilter
from .operators import LIST_OPERATORS, NULL_CHECK_OPERATORS
from .wheres import CollectionWhere, Where

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports import IQueryBuilder
    from .requests import FilterRequest, IRequestSource
    from .wheres import BaseWhere

logger = logging.getLogger("cqrs_ddd.request_filters.filterable")


class Filterable:
    """Ordered allow-list of filters."""

    def __init__(self, *filters: Filter | str) -> None:
        self.allowed_filters: list[Filter] = []
        self.add_filters(*filters)

    def add_filters(self, *filters: Filter | str) -> Filterable:
        """Allow filters; plain names become :class:`ExactFilter`."""
        for flt in filters:
            self.allowed_filters.append(
                ExactFilter(flt) if isinstance(flt, str) else flt
            )
        return self

    def find(self, param: str) -> Filter | None:
        """First allowed filter whose external name is *param*."""
        return next((f for f in self.allowed_filters if f.param == param), None)

    # -- flat mode -----------------------------------------------------------

    def apply(self, builder: IQueryBuilder, source: IRequestSource) -> None:
        for flt in self.allowed_filters:
            apply_flat(flt, builder, source)

    # -- body mode -----------------------------------------------------------

    def apply_body(
        self, builder: IQueryBuilder, nodes: Iterable[FilterRequest]
    ) -> None:
        for node in nodes:
            where = self.translate(node)
            if where is None:
                continue
            builder.where(where)

    def translate(self, node: FilterRequest) -> BaseWhere | None:
        """
        Translate one body node (recursively) into a predicate.

        Returns ``None`` when the node is dropped by the ignore policy
        (a group whose children were all dropped is dropped too).

        Raises:
            MalformedNodeError: Node needs exactly one of ``field``/``subFilters``.
            FieldNotAllowedError: ``field`` is not allow-listed.
            UnsupportedBodyOperationError: The filter has a fixed operator.
            InvalidValueError: The value cannot be transformed.
        """
        if node.sub_filters and node.field is not None:
            raise MalformedNodeError(
                "A filter node cannot have both a field and subFilters",
                field=node.field,
            )

        if node.sub_filters:
            children = [
                child
                for child in (self.translate(sub) for sub in node.sub_filters)
                if child is not None
            ]
            if not children:
                return None
            return CollectionWhere(children, node.combinator)

        if node.field is None:
            raise MalformedNodeError(
                "The field and subFilters cannot be empty at the same time"
            )

        return self._translate_leaf(node, node.field)

    def _translate_leaf(self, node: FilterRequest, field: str) -> Where | None:
        flt = self.find(field)
        if flt is None:
            logger.warning("Rejected body filter on field %r: not allowed", field)
            raise FieldNotAllowedError(
                f"The field {field!r} is not allowed", field=field
            )

        if not flt.supports_body_operation:
            logger.warning(
                "Rejected body filter on field %r: %s has a fixed operator",
                field,
                type(flt).__name__,
            )
            raise UnsupportedBodyOperationError(
                f"The filter {type(flt).__name__} on {field!r} does not support "
                "body operations",
                field=field,
            )

        operator = node.operator
        if operator in NULL_CHECK_OPERATORS:
            return Where(flt.internal_name, operator, None, node.combinator)

        value = node.value
        if value is None or flt.ignore(value):
            logger.debug("Dropping body filter on %r with value %r", field, value)
            return None

        final_value: Any
        if operator in LIST_OPERATORS:
            final_value = [flt.transform(v) for v in value.split(",") if v.strip()]
        else:
            final_value = flt.transform(value)

        return Where(flt.internal_name, operator, final_value, node.combinator)
