"""Tests for operator enums and prefix resolution."""

from __future__ import annotations

import pytest

from cqrs_ddd_request_filters import (
    Combinator,
    SortDirection,
    WhereOperator,
    resolve_operator,
)


@pytest.mark.parametrize(
    ("raw", "expected_op", "expected_value"),
    [
        ("<=5", WhereOperator.LESS_OR_EQUAL, "5"),
        (">=18", WhereOperator.GREATER_OR_EQUAL, "18"),
        ("<>0", WhereOperator.DIFF, "0"),
        ("!=0", WhereOperator.DIFF, "0"),
        (">25", WhereOperator.GREATER, "25"),
        ("<100", WhereOperator.LESS, "100"),
        ("42", WhereOperator.EQUAL, "42"),
    ],
)
def test_resolve_operator(raw, expected_op, expected_value) -> None:
    assert resolve_operator(raw) == (expected_op, expected_value)


def test_two_character_token_wins_over_single_character() -> None:
    op, value = resolve_operator("<=2024")
    assert op is WhereOperator.LESS_OR_EQUAL
    assert op is not WhereOperator.LESS
    assert value == "2024"


def test_equal_keeps_value_untouched() -> None:
    assert resolve_operator(" padded ") == (WhereOperator.EQUAL, " padded ")


class TestWireParsing:
    def test_operator_by_name(self) -> None:
        assert WhereOperator("FIND_IN_SET") is WhereOperator.FIND_IN_SET

    def test_operator_case_insensitive(self) -> None:
        assert WhereOperator("greater_or_equal") is WhereOperator.GREATER_OR_EQUAL

    @pytest.mark.parametrize(
        ("alias", "expected"),
        [
            ("=", WhereOperator.EQUAL),
            ("<>", WhereOperator.DIFF),
            ("!=", WhereOperator.DIFF),
            (">=", WhereOperator.GREATER_OR_EQUAL),
            ("like", WhereOperator.LIKE),
            ("not_in", WhereOperator.NOT_IN),
            ("null", WhereOperator.IS_NULL),
        ],
    )
    def test_operator_aliases(self, alias, expected) -> None:
        assert WhereOperator(alias) is expected

    def test_unknown_operator(self) -> None:
        with pytest.raises(ValueError):
            WhereOperator("between")

    def test_combinator_and_direction(self) -> None:
        assert Combinator("or") is Combinator.OR
        assert SortDirection("desc") is SortDirection.DESC
