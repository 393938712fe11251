"""Request filtering and sorting: query params or JSON body to predicate trees."""

from __future__ import annotations

from .adapters.memory import InMemoryQueryBuilder
from .exceptions import (
    FieldNotAllowedError,
    InvalidRequestError,
    InvalidValueError,
    MalformedNodeError,
    RequestFilterError,
    UnsupportedBodyOperationError,
)
from .filterable import Filterable
from .filters import (
    ComparisonFilter,
    CustomFilter,
    DateFilter,
    EmptyFilter,
    EnumFilter,
    ExactFilter,
    Filter,
    GreaterFilter,
    InFilter,
    IntervalDateFilter,
    IntervalFilter,
    IsNullFilter,
    LessFilter,
    LikeStrategy,
    NotEmptyFilter,
    PartialFilter,
    SearchFilter,
    SetFilter,
    apply_flat,
)
from .operators import Combinator, SortDirection, WhereOperator, resolve_operator
from .ports import IQueryBuilder
from .query import FilteredQuery
from .requests import (
    BodyRequest,
    FilterRequest,
    IRequestSource,
    MappingRequest,
    OrderRequest,
)
from .settings import RequestFilterSettings
from .sortable import OrderBy, Sortable
from .wheres import BaseWhere, CollectionWhere, Where

__all__ = [
    # Core types
    "WhereOperator",
    "Combinator",
    "SortDirection",
    "resolve_operator",
    "Where",
    "CollectionWhere",
    "BaseWhere",
    # Requests
    "BodyRequest",
    "FilterRequest",
    "OrderRequest",
    "IRequestSource",
    "MappingRequest",
    # Engines
    "Filterable",
    "Sortable",
    "OrderBy",
    "FilteredQuery",
    "RequestFilterSettings",
    # Ports / adapters
    "IQueryBuilder",
    "InMemoryQueryBuilder",
    # Filters
    "Filter",
    "apply_flat",
    "ComparisonFilter",
    "CustomFilter",
    "DateFilter",
    "EmptyFilter",
    "EnumFilter",
    "ExactFilter",
    "GreaterFilter",
    "InFilter",
    "IntervalDateFilter",
    "IntervalFilter",
    "IsNullFilter",
    "LessFilter",
    "LikeStrategy",
    "NotEmptyFilter",
    "PartialFilter",
    "SearchFilter",
    "SetFilter",
    # Exceptions
    "RequestFilterError",
    "InvalidValueError",
    "FieldNotAllowedError",
    "UnsupportedBodyOperationError",
    "MalformedNodeError",
    "InvalidRequestError",
]
