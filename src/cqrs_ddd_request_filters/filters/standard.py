"""Plain filters: exact, like, ranges, comparisons, lists, null checks, search."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from ..exceptions import InvalidValueError
from ..operators import Combinator, WhereOperator, resolve_operator
from ..wheres import CollectionWhere, Where
from .base import Filter

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports import IQueryBuilder


class LikeStrategy(str, Enum):
    """Where the ``%`` wildcard goes around a LIKE value."""

    FINAL = "final"  # value%
    START = "start"  # %value
    COMPLETE = "complete"  # %value%

    def apply(self, value: str) -> str:
        if self is LikeStrategy.START:
            return f"%{value}"
        if self is LikeStrategy.COMPLETE:
            return f"%{value}%"
        return f"{value}%"


class ExactFilter(Filter):
    """``field = value``; the default for names allowed as plain strings."""

    supports_body_operation = True

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        builder.where(Where(self.internal_name, WhereOperator.EQUAL, value))


class PartialFilter(Filter):
    """``field LIKE value%`` (starts-with unless another strategy is given)."""

    def __init__(
        self,
        param: str,
        internal_name: str | None = None,
        *,
        strategy: LikeStrategy = LikeStrategy.FINAL,
    ) -> None:
        super().__init__(param, internal_name)
        self.strategy = strategy

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        builder.where(
            Where(self.internal_name, WhereOperator.LIKE, self.strategy.apply(value))
        )


def split_interval(param: str, value: str) -> tuple[str, str | None]:
    """Split ``"min,max"`` into its halves; ``max`` is ``None`` without a comma."""
    if "," not in value:
        return value, None
    parts = value.split(",")
    if len(parts) != 2:
        raise InvalidValueError(
            f"Expected 'min,max' for {param!r}, got {value!r}", field=param
        )
    return parts[0], parts[1]


class IntervalFilter(Filter):
    """
    Range filter over ``"min,max"``; either side may be omitted.

    Bounds are passed through as raw strings, numeric coercion is the
    query builder's business.
    """

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        start, end = split_interval(self.param, value)
        if start.strip():
            builder.where(
                Where(self.internal_name, WhereOperator.GREATER_OR_EQUAL, start)
            )
        if end is not None and end.strip():
            builder.where(
                Where(self.internal_name, WhereOperator.LESS_OR_EQUAL, end)
            )


class ComparisonFilter(Filter):
    """
    Comparison driven by an optional operator prefix.

    ``">=18"`` → ``GREATER_OR_EQUAL 18``, ``"<>0"`` → ``DIFF 0``,
    ``"25"`` → ``EQUAL 25``.
    """

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        operator, clean = resolve_operator(value)
        if not clean:
            raise InvalidValueError(
                f"Value cannot be empty for comparison filter {self.param!r}",
                field=self.param,
            )
        builder.where(Where(self.internal_name, operator, self.transform(clean)))


def _as_number(value: str) -> int | float | str:
    try:
        return float(value) if "." in value else int(value)
    except ValueError:
        return value


class _BoundFilter(Filter):
    """One-sided comparison with a fixed operator; numeric values are coerced."""

    strict: ClassVar[WhereOperator]
    inclusive: ClassVar[WhereOperator]

    def __init__(
        self,
        param: str,
        internal_name: str | None = None,
        *,
        or_equal: bool = False,
    ) -> None:
        super().__init__(param, internal_name)
        self.or_equal = or_equal

    @property
    def operator(self) -> WhereOperator:
        return self.inclusive if self.or_equal else self.strict

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        clean = value.strip()
        if not clean:
            raise InvalidValueError(
                f"Value cannot be empty for {self.param!r}", field=self.param
            )
        builder.where(Where(self.internal_name, self.operator, _as_number(clean)))


class GreaterFilter(_BoundFilter):
    """``field > value``, or ``>=`` with ``or_equal=True``."""

    strict = WhereOperator.GREATER
    inclusive = WhereOperator.GREATER_OR_EQUAL


class LessFilter(_BoundFilter):
    """``field < value``, or ``<=`` with ``or_equal=True``."""

    strict = WhereOperator.LESS
    inclusive = WhereOperator.LESS_OR_EQUAL


class InFilter(Filter):
    """``field IN (a, b, c)`` from a delimited list."""

    def __init__(
        self,
        param: str,
        internal_name: str | None = None,
        *,
        delimiter: str = ",",
    ) -> None:
        super().__init__(param, internal_name)
        self.delimiter = delimiter

    def split(self, value: str) -> list[str]:
        return [v.strip() for v in value.split(self.delimiter) if v.strip()]

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        values = self.split(value)
        if not values:
            raise InvalidValueError(
                f"Value list cannot be empty for IN filter {self.param!r}",
                field=self.param,
            )
        builder.where(Where(self.internal_name, WhereOperator.IN, values))


_NULL_TOKENS = frozenset({"true", "null", "1", "yes"})


class IsNullFilter(Filter):
    """``"true"``/``"null"`` → IS NULL, anything else → IS NOT NULL."""

    def transform(self, value: str) -> bool:
        return value.strip().lower() in _NULL_TOKENS

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        is_null = self.transform(value)
        operator = WhereOperator.IS_NULL if is_null else WhereOperator.IS_NOT_NULL
        builder.where(Where(self.internal_name, operator, None))


class SearchFilter(Filter):
    """One LIKE per target field, OR-ed together inside a single group."""

    def __init__(
        self,
        param: str,
        *fields: str,
        strategy: LikeStrategy = LikeStrategy.FINAL,
    ) -> None:
        super().__init__(param)
        self.fields: tuple[str, ...] = tuple(dict.fromkeys(fields))
        self.strategy = strategy

    @classmethod
    def of(cls, *fields: str, param: str = "search") -> SearchFilter:
        return cls(param, *fields)

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        if not self.fields:
            return
        pattern = self.strategy.apply(value)
        builder.where(
            CollectionWhere(
                [
                    Where(f, WhereOperator.LIKE, pattern, Combinator.OR)
                    for f in self.fields
                ]
            )
        )


class EmptyFilter(Filter):
    """``(field IS NULL OR field = '')`` whenever the parameter is present."""

    triggers_on_presence = True

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        builder.where(
            CollectionWhere(
                [
                    Where(self.internal_name, WhereOperator.IS_NULL, None),
                    Where(self.internal_name, WhereOperator.EQUAL, "", Combinator.OR),
                ]
            )
        )


class NotEmptyFilter(Filter):
    """``(field IS NOT NULL AND field <> '')`` whenever the parameter is present."""

    triggers_on_presence = True

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        builder.where(
            CollectionWhere(
                [
                    Where(self.internal_name, WhereOperator.IS_NOT_NULL, None),
                    Where(self.internal_name, WhereOperator.DIFF, ""),
                ]
            )
        )


class CustomFilter(Filter):
    """Delegates predicate construction to a caller-supplied function."""

    supports_body_operation = True

    def __init__(
        self,
        param: str,
        fn: Callable[[IQueryBuilder, str], None],
        internal_name: str | None = None,
    ) -> None:
        super().__init__(param, internal_name)
        self._fn = fn

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        self._fn(builder, value)
