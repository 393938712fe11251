"""
Request-filter exception hierarchy.

Every error is fatal to the current query-configuration call and carries
structured ``errors`` (``{field: [messages]}``) plus ``to_dict()`` for
API-friendly 4xx responses.
"""

from __future__ import annotations

from typing import Any


class RequestFilterError(Exception):
    """Base exception for all request filter/sort translation errors."""

    code = "REQUEST_FILTER_ERROR"
    status_code = 400

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        self.errors: dict[str, list[str]] = {field or "__root__": [message]}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "field": self.field,
        }


class InvalidValueError(RequestFilterError):
    """A value could not be transformed (bad date, unknown enum member, ...)."""

    code = "INVALID_VALUE"


class FieldNotAllowedError(RequestFilterError):
    """Raised when a filter or sort field is not in the allow-list."""

    code = "FIELD_NOT_ALLOWED"


class UnsupportedBodyOperationError(RequestFilterError):
    """Raised when a body node targets a filter with a fixed operator."""

    code = "UNSUPPORTED_BODY_OPERATION"


class MalformedNodeError(RequestFilterError):
    """Raised when a body node has neither ``field`` nor ``subFilters``."""

    code = "MALFORMED_NODE"


class InvalidRequestError(RequestFilterError):
    """Raised when the request cannot be used (wrong method, unreadable body)."""

    code = "INVALID_REQUEST"
