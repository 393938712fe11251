"""Filters validating values against an ``Enum`` type."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from ..exceptions import InvalidValueError
from ..operators import Combinator, WhereOperator
from ..wheres import CollectionWhere, Where
from .base import Filter

if TYPE_CHECKING:
    from ..ports import IQueryBuilder

E = TypeVar("E", bound=Enum)


class _EnumValueFilter(Filter, Generic[E]):
    supports_body_operation = True

    def __init__(
        self,
        param: str,
        enum_type: type[E],
        internal_name: str | None = None,
    ) -> None:
        super().__init__(param, internal_name)
        self.enum_type = enum_type

    def transform(self, value: str) -> E:
        try:
            return self.enum_type[value.strip()]
        except KeyError:
            allowed = ", ".join(self.enum_type.__members__)
            raise InvalidValueError(
                f"Invalid value {value!r} for {self.param!r}, "
                f"allowed values: {allowed}",
                field=self.param,
            ) from None

    def members(self, value: str, separator: str) -> list[E]:
        """Resolve every non-blank element, dropping duplicates but keeping order."""
        tokens = [v for v in value.split(separator) if v.strip()]
        if not tokens:
            raise InvalidValueError(
                f"No values given for {self.param!r}", field=self.param
            )
        return list(dict.fromkeys(self.transform(v) for v in tokens))


class EnumFilter(_EnumValueFilter[E]):
    """
    ``field = MEMBER`` or, for ``"A,B"`` / ``"A|B"``, ``field IN (A, B)``.
    """

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        separator = "|" if "|" in value else ","
        if separator in value:
            members = self.members(value, separator)
            builder.where(Where(self.internal_name, WhereOperator.IN, members))
            return
        member = self.transform(value)
        builder.where(Where(self.internal_name, WhereOperator.EQUAL, member))


class SetFilter(_EnumValueFilter[E]):
    """
    Membership test against a set-typed column.

    ``"A,B"`` requires every member (AND group), ``"A|B"`` any of them
    (OR group). With ``negate=True`` the members must be absent instead.
    """

    def __init__(
        self,
        param: str,
        enum_type: type[E],
        internal_name: str | None = None,
        *,
        negate: bool = False,
    ) -> None:
        super().__init__(param, enum_type, internal_name)
        self.negate = negate

    @property
    def operator(self) -> WhereOperator:
        if self.negate:
            return WhereOperator.NOT_FIND_IN_SET
        return WhereOperator.FIND_IN_SET

    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        if "|" in value:
            separator, combinator = "|", Combinator.OR
        elif "," in value:
            separator, combinator = ",", Combinator.AND
        else:
            member = self.transform(value)
            builder.where(Where(self.internal_name, self.operator, member))
            return

        builder.where(
            CollectionWhere(
                [
                    Where(self.internal_name, self.operator, member, combinator)
                    for member in self.members(value, separator)
                ]
            )
        )
