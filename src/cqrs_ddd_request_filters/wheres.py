"""
Predicate tree handed to the query builder.

A :class:`Where` is a single ``field operator value`` comparison; a
:class:`CollectionWhere` is a parenthesised group. Each node carries the
combinator that joins it to its preceding sibling, so the tree mirrors the
``FilterRequest`` tree it was translated from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .operators import Combinator, WhereOperator


@dataclass(frozen=True)
class Where:
    field: str
    operator: WhereOperator
    value: Any = None
    combinator: Combinator = Combinator.AND

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "operator": self.operator.value,
            "value": _serialise(self.value),
            "type": self.combinator.value,
        }


@dataclass(frozen=True)
class CollectionWhere:
    children: tuple[BaseWhere, ...] = field(default_factory=tuple)
    combinator: Combinator = Combinator.AND

    def __post_init__(self) -> None:
        # Accept any iterable of children but store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def to_dict(self) -> dict[str, Any]:
        return {
            "subFilters": [child.to_dict() for child in self.children],
            "type": self.combinator.value,
        }


BaseWhere = Union[Where, CollectionWhere]


def _serialise(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, list | tuple | set | frozenset):
        return [_serialise(v) for v in value]
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value
