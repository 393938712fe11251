"""Filter variants, one class per way a parameter turns into predicates."""

from __future__ import annotations

from .base import Filter, apply_flat
from .enums import EnumFilter, SetFilter
from .standard import (
    ComparisonFilter,
    CustomFilter,
    EmptyFilter,
    ExactFilter,
    GreaterFilter,
    InFilter,
    IntervalFilter,
    IsNullFilter,
    LessFilter,
    LikeStrategy,
    NotEmptyFilter,
    PartialFilter,
    SearchFilter,
)
from .temporal import DateFilter, IntervalDateFilter

__all__ = [
    "ComparisonFilter",
    "CustomFilter",
    "DateFilter",
    "EmptyFilter",
    "EnumFilter",
    "ExactFilter",
    "GreaterFilter",
    "Filter",
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
    "apply_flat",
]
