"""Operators, combinators, sort directions and operator-prefix resolution."""

from __future__ import annotations

from enum import Enum


class WhereOperator(str, Enum):
    """Comparison operators a predicate can carry."""

    EQUAL = "EQUAL"
    DIFF = "DIFF"
    LESS = "LESS"
    LESS_OR_EQUAL = "LESS_OR_EQUAL"
    GREATER = "GREATER"
    GREATER_OR_EQUAL = "GREATER_OR_EQUAL"
    LIKE = "LIKE"
    IN = "IN"
    NOT_IN = "NOT_IN"
    IS_NULL = "IS_NULL"
    IS_NOT_NULL = "IS_NOT_NULL"
    FIND_IN_SET = "FIND_IN_SET"
    NOT_FIND_IN_SET = "NOT_FIND_IN_SET"

    @classmethod
    def _missing_(cls, value: object) -> WhereOperator | None:
        if not isinstance(value, str):
            return None
        text = value.strip()
        alias = _OP_ALIASES.get(text) or _OP_ALIASES.get(text.lower())
        if alias is not None:
            return alias
        return cls.__members__.get(text.upper())


# Map common spellings to WhereOperator members
_OP_ALIASES: dict[str, WhereOperator] = {
    "=": WhereOperator.EQUAL,
    "eq": WhereOperator.EQUAL,
    "<>": WhereOperator.DIFF,
    "!=": WhereOperator.DIFF,
    "ne": WhereOperator.DIFF,
    "<": WhereOperator.LESS,
    "lt": WhereOperator.LESS,
    "<=": WhereOperator.LESS_OR_EQUAL,
    "lte": WhereOperator.LESS_OR_EQUAL,
    ">": WhereOperator.GREATER,
    "gt": WhereOperator.GREATER,
    ">=": WhereOperator.GREATER_OR_EQUAL,
    "gte": WhereOperator.GREATER_OR_EQUAL,
    "like": WhereOperator.LIKE,
    "in": WhereOperator.IN,
    "not_in": WhereOperator.NOT_IN,
    "is_null": WhereOperator.IS_NULL,
    "null": WhereOperator.IS_NULL,
    "is_not_null": WhereOperator.IS_NOT_NULL,
    "not_null": WhereOperator.IS_NOT_NULL,
}

NULL_CHECK_OPERATORS: frozenset[WhereOperator] = frozenset(
    {WhereOperator.IS_NULL, WhereOperator.IS_NOT_NULL}
)
LIST_OPERATORS: frozenset[WhereOperator] = frozenset(
    {WhereOperator.IN, WhereOperator.NOT_IN}
)


class Combinator(str, Enum):
    """How a predicate combines with its preceding sibling."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def _missing_(cls, value: object) -> Combinator | None:
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def _missing_(cls, value: object) -> SortDirection | None:
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


# Two-character tokens first: "<=" contains "<".
_PREFIX_TOKENS: tuple[tuple[str, WhereOperator], ...] = (
    ("<=", WhereOperator.LESS_OR_EQUAL),
    (">=", WhereOperator.GREATER_OR_EQUAL),
    ("<>", WhereOperator.DIFF),
    ("!=", WhereOperator.DIFF),
    (">", WhereOperator.GREATER),
    ("<", WhereOperator.LESS),
)


def resolve_operator(value: str) -> tuple[WhereOperator, str]:
    """
    Infer the comparison operator carried by *value*.

    Returns the operator and the value with the operator token removed.
    A value without any token resolves to ``EQUAL`` and is returned as is.

    Example::

        resolve_operator("<=5")   # (LESS_OR_EQUAL, "5")
        resolve_operator("<>a")   # (DIFF, "a")
        resolve_operator("42")    # (EQUAL, "42")
    """
    for token, operator in _PREFIX_TOKENS:
        if token in value:
            return operator, value.replace(token, "").strip()
    return WhereOperator.EQUAL, value
