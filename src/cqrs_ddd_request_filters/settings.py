"""RequestFilterSettings: immutable configuration for one query setup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class RequestFilterSettings(BaseModel):
    """
    Knobs shared by the orchestrator, ``Sortable`` and the date filters.

    Attributes:
        sort_param: Name of the flat sort parameter.
        search_param: Default parameter name for ``SearchFilter.of``.
        date_format: ``strptime`` format used when a date filter is built
            through :meth:`FilteredQuery.date_filter`.
        body_methods: HTTP methods whose body is read in body mode.
    """

    model_config = ConfigDict(frozen=True)

    sort_param: str = "sort"
    search_param: str = "search"
    date_format: str = DEFAULT_DATE_FORMAT
    body_methods: tuple[str, ...] = ("POST",)

    @field_validator("body_methods")
    @classmethod
    def _upper_methods(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(m.upper() for m in v)

    def accepts_body(self, method: str) -> bool:
        return method.upper() in self.body_methods
