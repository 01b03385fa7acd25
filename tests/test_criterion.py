"""Tests for Criterion parsing."""

from __future__ import annotations

import pytest

from cqrs_ddd_sorting.criterion import Criterion
from cqrs_ddd_sorting.exceptions import InvalidOrderError, SortParseError
from cqrs_ddd_sorting.order import SortOrder
from cqrs_ddd_sorting.path import JoinPath

# -- make: order resolution ---------------------------------------------------


@pytest.mark.parametrize("default", [SortOrder.ASCENDING, SortOrder.DESCENDING])
def test_make_without_suffix_uses_default_order(default: SortOrder) -> None:
    criterion = Criterion.make("created_at", default)
    assert criterion.field == "created_at"
    assert criterion.order is default


def test_make_defaults_to_ascending() -> None:
    assert Criterion.make("name").order is SortOrder.ASCENDING


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("name,asc", SortOrder.ASCENDING), ("name,desc", SortOrder.DESCENDING)],
)
@pytest.mark.parametrize("default", [SortOrder.ASCENDING, SortOrder.DESCENDING])
def test_explicit_order_wins_over_default(
    raw: str, expected: SortOrder, default: SortOrder
) -> None:
    criterion = Criterion.make(raw, default)
    assert criterion.field == "name"
    assert criterion.order is expected


def test_default_order_accepts_string() -> None:
    assert Criterion.make("name", "desc").order is SortOrder.DESCENDING


# -- make: trimming -----------------------------------------------------------


def test_whitespace_padding_is_trimmed() -> None:
    assert Criterion.make("  field,asc \t") == Criterion.make("field,asc")


def test_control_characters_are_trimmed() -> None:
    criterion = Criterion.make("\0\x0b\r\nfield,desc\n\0")
    assert criterion.field == "field"
    assert criterion.order is SortOrder.DESCENDING


def test_inner_whitespace_is_kept() -> None:
    assert Criterion.make("full name").field == "full name"


# -- make: failures -----------------------------------------------------------


@pytest.mark.parametrize(
    "raw",
    ["", "   ", ",asc", "field,up", "field,ASC", "field,", "a,b,asc", "a,b"],
)
def test_malformed_directive_raises_parse_error(raw: str) -> None:
    with pytest.raises(SortParseError) as exc_info:
        Criterion.make(raw)
    assert exc_info.value.value == raw


def test_parse_error_message_contains_raw_value() -> None:
    with pytest.raises(SortParseError, match="name,up"):
        Criterion.make("name,up")


def test_invalid_default_order_raises() -> None:
    with pytest.raises(InvalidOrderError):
        Criterion.make("name", "sideways")


# -- direct construction ------------------------------------------------------


def test_direct_construction_rejects_unknown_order() -> None:
    with pytest.raises(InvalidOrderError) as exc_info:
        Criterion(field="name", order="up")
    assert exc_info.value.order == "up"


def test_criterion_is_immutable() -> None:
    criterion = Criterion.make("name")
    with pytest.raises(Exception):  # noqa: B017, PT011
        criterion.field = "other"  # type: ignore[misc]


def test_criteria_are_hashable_values() -> None:
    criteria = {Criterion.make("a,asc"), Criterion.make(" a "), Criterion.make("b")}
    assert len(criteria) == 2


def test_str_renders_directive() -> None:
    assert str(Criterion.make("name", SortOrder.DESCENDING)) == "name,desc"


# -- join paths ---------------------------------------------------------------


def test_plain_field_has_no_join_path() -> None:
    assert Criterion.make("name").join_path is None


def test_dotted_field_exposes_join_path() -> None:
    criterion = Criterion.make("orders.customers.customer_id.name.flip,desc")
    assert criterion.join_path == JoinPath(
        "orders", "customers", "customer_id", "name", flip=True
    )
    assert criterion.order is SortOrder.DESCENDING


@pytest.mark.parametrize(
    "raw",
    [
        "customers.name",
        "orders.customers.name",
        "orders.customers.customer_id.name.flop",
        "orders.customers.customer_id.name.flip.extra",
        "orders..customer_id.name",
    ],
)
def test_malformed_join_path_raises_parse_error(raw: str) -> None:
    with pytest.raises(SortParseError) as exc_info:
        Criterion.make(f"{raw},asc")
    assert exc_info.value.value == f"{raw},asc"
    assert exc_info.value.reason
