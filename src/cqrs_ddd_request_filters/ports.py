"""IQueryBuilder: the query-building port filters and sorts write into."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .operators import SortDirection
    from .wheres import BaseWhere


@runtime_checkable
class IQueryBuilder(Protocol):
    """
    Accumulates predicates and ordering for a backend query.

    Top-level predicates combine with each other using their own
    combinator (``AND`` for everything produced in flat mode).
    Execution is the implementation's concern, not this package's.
    """

    def where(self, node: BaseWhere) -> Any:
        """Attach a predicate leaf or group."""
        ...

    def order_by(self, field: str, direction: SortDirection) -> Any:
        """Append an ordering clause; call order defines precedence."""
        ...
