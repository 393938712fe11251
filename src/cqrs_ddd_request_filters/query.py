"""
FilteredQuery: wire a request into ``Filterable``/``Sortable`` and a builder.

Example::

    builder = SQLAlchemyQueryBuilder(User)
    (
        FilteredQuery(builder)
        .allowed_filters("name", IntervalFilter("age"), EnumFilter("status", Status))
        .allowed_sorts("name", OrderBy("age", "birth_year"))
        .use_body()
        .apply(MappingRequest(params, method="POST", body=payload))
    )
    stmt = builder.statement()
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from .exceptions import InvalidRequestError
from .filterable import Filterable
from .filters.standard import SearchFilter
from .filters.temporal import DateFilter, IntervalDateFilter
from .settings import RequestFilterSettings
from .sortable import Sortable

if TYPE_CHECKING:
    from .filters.base import Filter
    from .ports import IQueryBuilder
    from .requests import IRequestSource
    from .sortable import OrderBy

logger = logging.getLogger("cqrs_ddd.request_filters.query")

B = TypeVar("B", bound="IQueryBuilder")


class FilteredQuery(Generic[B]):
    """Fluent configuration of what a request may filter and sort on."""

    def __init__(
        self,
        builder: B,
        settings: RequestFilterSettings | None = None,
    ) -> None:
        self.builder = builder
        self.settings = settings or RequestFilterSettings()
        self.filterable = Filterable()
        self.sortable = Sortable(sort_param=self.settings.sort_param)
        self._use_body = False
        self._only_body = False

    # -- configuration -------------------------------------------------------

    def allowed_filters(self, *filters: Filter | str) -> FilteredQuery[B]:
        """Allow filters; plain names are exact-match filters."""
        self.filterable.add_filters(*filters)
        return self

    def allowed_sorts(self, *sorts: OrderBy | str) -> FilteredQuery[B]:
        self.sortable.add_sorts(*sorts)
        return self

    def use_body(self) -> FilteredQuery[B]:
        """Read the body for body methods, parameters otherwise."""
        self._use_body = True
        return self

    def use_only_body(self) -> FilteredQuery[B]:
        """Read only the body; other methods are rejected."""
        self._use_body = True
        self._only_body = True
        return self

    # -- filter factories bound to settings ----------------------------------

    def search_filter(self, *fields: str) -> SearchFilter:
        return SearchFilter(self.settings.search_param, *fields)

    def date_filter(
        self,
        param: str,
        internal_name: str | None = None,
        *,
        interval: bool = False,
        date_type: type[datetime.date] = datetime.date,
    ) -> DateFilter | IntervalDateFilter:
        cls = IntervalDateFilter if interval else DateFilter
        return cls(
            param,
            internal_name,
            date_format=self.settings.date_format,
            date_type=date_type,
        )

    # -- application ---------------------------------------------------------

    def apply(self, request: IRequestSource) -> B:
        """Translate *request* into predicates and ordering on the builder."""
        body_method = self.settings.accepts_body(request.method)

        if self._only_body and not body_method:
            logger.warning("Rejected %s request: body is required", request.method)
            raise InvalidRequestError(
                f"Body can only be used with {', '.join(self.settings.body_methods)} "
                "requests"
            )

        if self._use_body and body_method:
            body = request.get_body()
            if body is None:
                logger.warning("Rejected %s request: no body", request.method)
                raise InvalidRequestError("No body in request")
            logger.debug(
                "Applying %d body filter(s) and %d sort(s)",
                len(body.filters),
                len(body.sorts),
            )
            self.filterable.apply_body(self.builder, body.filters)
            self.sortable.apply_body(self.builder, body.sorts)
            return self.builder

        self.filterable.apply(self.builder, request)
        self.sortable.apply(self.builder, request)
        return self.builder
