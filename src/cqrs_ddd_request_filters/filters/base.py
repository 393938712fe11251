"""
Filter: a single allow-listed request parameter and how it becomes a predicate.

Each concrete filter implements :meth:`Filter.apply_value`; the flat
lookup/default/ignore algorithm is shared by all of them through
:func:`apply_flat`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from ..ports import IQueryBuilder
    from ..requests import IRequestSource

logger = logging.getLogger("cqrs_ddd.request_filters.filters")


class Filter(ABC):
    """
    Base class for every filter variant.

    Attributes:
        param: External (client-facing) parameter name.
        internal_name: Query field the predicate targets. Defaults to ``param``.
        default_value: Used when the parameter is absent.
        ignored: Values (compared after trimming) that never produce a predicate.
    """

    #: Safe to drive with an arbitrary client-supplied operator in body mode.
    supports_body_operation: ClassVar[bool] = False
    #: Apply whenever the parameter is present, whatever its value.
    triggers_on_presence: ClassVar[bool] = False

    def __init__(self, param: str, internal_name: str | None = None) -> None:
        self.param = param
        self.internal_name = internal_name or param
        self.default_value: str | None = None
        self.ignored: set[str] = set()

    def add_ignore(self, *values: str) -> Filter:
        self.ignored.update(values)
        return self

    def set_default_value(self, value: str | None) -> Filter:
        self.default_value = value
        return self

    def ignore(self, value: str) -> bool:
        return value.strip() in self.ignored

    def transform(self, value: str) -> Any:
        return value

    @abstractmethod
    def apply_value(self, builder: IQueryBuilder, value: str) -> None:
        """Emit the predicate(s) for a resolved, non-ignored raw value."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(param={self.param!r}, "
            f"internal_name={self.internal_name!r})"
        )


def apply_flat(flt: Filter, builder: IQueryBuilder, source: IRequestSource) -> None:
    """Apply *flt* against a flat parameter source."""
    raw = source.find_parameter(flt.param)

    if flt.triggers_on_presence:
        if raw is not None:
            flt.apply_value(builder, raw)
        return

    value = raw if raw is not None and raw.strip() else flt.default_value
    if value is None:
        return

    if flt.ignore(value):
        logger.debug("Ignoring value %r for filter %s", value, flt.param)
        return

    flt.apply_value(builder, value)
