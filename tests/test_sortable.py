"""Tests for Sortable."""

from __future__ import annotations

import pytest

from cqrs_ddd_request_filters import (
    FieldNotAllowedError,
    MalformedNodeError,
    OrderBy,
    OrderRequest,
    Sortable,
    SortDirection,
)


def test_order_by_defaults_internal_name() -> None:
    assert OrderBy("age").internal_name == "age"
    assert OrderBy("age", "birth_year").internal_name == "birth_year"


def test_flat_sort_preserves_order(builder, params) -> None:
    Sortable("country", "age").apply(builder, params(sort="country,-age"))
    assert builder.orders == [
        ("country", SortDirection.ASC),
        ("age", SortDirection.DESC),
    ]


def test_flat_sort_uses_internal_name(builder, params) -> None:
    Sortable(OrderBy("age", "birth_year")).apply(builder, params(sort="-age"))
    assert builder.orders == [("birth_year", SortDirection.DESC)]


def test_flat_sort_trims_and_skips_empty_tokens(builder, params) -> None:
    Sortable("a", "b").apply(builder, params(sort=" a , ,-b "))
    assert builder.orders == [("a", SortDirection.ASC), ("b", SortDirection.DESC)]


def test_missing_sort_is_noop(builder, params) -> None:
    Sortable("a").apply(builder, params())
    assert builder.orders == []


def test_unknown_field_emits_nothing(builder, params) -> None:
    with pytest.raises(FieldNotAllowedError) as exc_info:
        Sortable("country").apply(builder, params(sort="country,password"))
    assert exc_info.value.field == "password"
    assert builder.orders == []


def test_custom_sort_param(builder, params) -> None:
    Sortable("a", sort_param="order").apply(builder, params(order="-a", sort="b"))
    assert builder.orders == [("a", SortDirection.DESC)]


def test_body_sorts(builder) -> None:
    Sortable("name", "age").apply_body(
        builder,
        [
            OrderRequest(field="age", sort=SortDirection.DESC),
            OrderRequest(field="name"),
        ],
    )
    assert builder.orders == [("age", SortDirection.DESC), ("name", SortDirection.ASC)]


def test_body_sort_without_field(builder) -> None:
    with pytest.raises(MalformedNodeError):
        Sortable("name").apply_body(builder, [OrderRequest()])


def test_parse() -> None:
    assert Sortable.parse("-a,b") == [
        OrderRequest(field="a", sort=SortDirection.DESC),
        OrderRequest(field="b", sort=SortDirection.ASC),
    ]
