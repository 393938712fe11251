"""Date filters. Parse format and result type are immutable per-instance settings."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from ..exceptions import InvalidValueError
from ..operators import WhereOperator, resolve_operator
from ..settings import DEFAULT_DATE_FORMAT
from ..wheres import Where
from .base import Filter
from .standard import split_interval

if TYPE_CHECKING:
    from ..ports import IQueryBuilder


class _DateParsingFilter(Filter):
    def __init__(
        self,
        param: str,
        internal_name: str | None = None,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
        date_type: type[datetime.date] = datetime.date,
    ) -> None:
        if date_type not in (datetime.date, datetime.datetime):
            raise TypeError(f"date_type must be date or datetime, got {date_type!r}")
        super().__init__(param, internal_name)
        self.date_format = date_format
        self.date_type = date_type

    def transform(self, value: str) -> datetime.date:
        try:
            parsed = datetime.datetime.strptime(value.strip(), self.date_format)
        except ValueError as exc:
            raise InvalidValueError(
                f"Invalid date {value!r} for {self.param!r}, "
                f"expected format {self.date_format!r}",
                field=self.param,
            ) from exc
        if self.date_type is datetime.date:
            return parsed.date()
        return parsed

    def emit_range(self, builder: IQueryBuilder, start: str, end: str | None) -> None:
        # Parse both bounds before emitting anything
        lower = self.transform(start) if start.strip() else None
        upper = self.transform(end) if end is not None and end.strip() else None
        if lower is not None:
            builder.where(
                Where(self.internal_name, WhereOperator.GREATER_OR_EQUAL, lower)
            )
        if upper is not None:
            builder.where(Where(self.internal_name, WhereOperator.LESS_OR_EQUAL, upper))


class DateFilter(_DateParsingFilter):
    """
    Comparison filter whose value is parsed as a date.

    ``">=2024-01-01"`` compares with the prefixed operator, ``"2024-01-01"``
    matches the exact date and ``"2024-01-01|2024-12-31"`` is an inclusive
    range where either side may be left blank.
    """

    supports_body_operation = True

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        if "|" in value:
            parts = value.split("|")
            if len(parts) > 2:
                raise InvalidValueError(
                    f"Date range for {self.param!r} takes at most two values",
                    field=self.param,
                )
            self.emit_range(builder, parts[0], parts[1])
            return
        operator, clean = resolve_operator(value)
        builder.where(Where(self.internal_name, operator, self.transform(clean)))


class IntervalDateFilter(_DateParsingFilter):
    """``"from,to"`` date range; a single date only sets the lower bound."""

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        start, end = split_interval(self.param, value)
        self.emit_range(builder, start, end)
