"""
Request-side models: the JSON body payload and the parameter source port.

Body payload shape::

    {
      "filters": [{"field": "age", "operator": "GREATER", "value": "18",
                   "subFilters": [...], "type": "AND"}],
      "sorts": [{"field": "name", "sort": "DESC"}]
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidRequestError
from .operators import Combinator, SortDirection, WhereOperator


class FilterRequest(BaseModel):
    """One node of the body filter tree: a leaf (``field``) or a group."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field: str | None = None
    operator: WhereOperator = WhereOperator.EQUAL
    value: str | None = None
    sub_filters: list[FilterRequest] = Field(default_factory=list, alias="subFilters")
    combinator: Combinator = Field(default=Combinator.AND, alias="type")

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_value(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, list | tuple):
            return ",".join(str(item) for item in v)
        return str(v)


class OrderRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field: str | None = None
    sort: SortDirection = SortDirection.ASC


class BodyRequest(BaseModel):
    """Parsed request body holding the filter tree and the sort list."""

    model_config = ConfigDict(frozen=True)

    filters: list[FilterRequest] = Field(default_factory=list)
    sorts: list[OrderRequest] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: Any) -> BodyRequest:
        """Build from a dict, a JSON string/bytes, or an existing instance."""
        if isinstance(raw, BodyRequest):
            return raw
        try:
            if isinstance(raw, str | bytes | bytearray):
                return cls.model_validate_json(raw)
            return cls.model_validate(raw)
        except PydanticValidationError as exc:
            raise InvalidRequestError(f"Error reading body request: {exc}") from exc


@runtime_checkable
class IRequestSource(Protocol):
    """What the translation engine needs from an HTTP request."""

    @property
    def method(self) -> str: ...

    def find_parameter(self, name: str) -> str | None:
        """Return the raw parameter value, or ``None`` when absent."""
        ...

    def get_body(self) -> BodyRequest | None:
        """Return the parsed body, or ``None`` when the request has none."""
        ...


class MappingRequest:
    """
    ``IRequestSource`` over a plain mapping of query parameters.

    Multi-valued parameters (lists) resolve to their first element, as a
    servlet-style ``getParameter`` would. The body may be a dict, a JSON
    string or a :class:`BodyRequest`; it is parsed once on first access.
    """

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        method: str = "GET",
        body: Any = None,
    ) -> None:
        self._params = dict(params or {})
        self._method = method.upper()
        self._raw_body = body
        self._body: BodyRequest | None = None

    @property
    def method(self) -> str:
        return self._method

    def find_parameter(self, name: str) -> str | None:
        value = self._params.get(name)
        if isinstance(value, list | tuple):
            value = value[0] if value else None
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def get_body(self) -> BodyRequest | None:
        if self._body is not None:
            return self._body
        if self._raw_body is None:
            return None
        raw = self._raw_body
        if isinstance(raw, str | bytes | bytearray) and not raw.strip():
            return None
        self._body = BodyRequest.parse(raw)
        return self._body

    def clean_body(self) -> None:
        """Drop the cached parsed body so the next access parses again."""
        self._body = None
