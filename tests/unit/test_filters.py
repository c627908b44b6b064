"""Tests for FieldQuery to SQL translation."""

from datetime import UTC, date, datetime
from uuid import uuid4

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.value_objects import MatchStrategy
from travelrec.infrastructure.persistence.postgres.filters import build_condition

COLUMNS = {
    "id": "id",
    "name": "name",
    "location.city": "location->>'city'",
    "approved": "approved",
    "date_of_visit": "date_of_visit",
    "permission_ids": "id IN (SELECT role_id FROM role_permission WHERE permission_id = %s)",
}


def test_text_uses_ilike_with_escaped_wildcards() -> None:
    sql, params = build_condition(
        FieldQuery("name", MatchStrategy.TEXT, "50%_off"), COLUMNS
    )
    assert sql == "name ILIKE %s"
    assert params == ["%50\\%\\_off%"]


def test_nested_attribute_uses_json_expression() -> None:
    sql, params = build_condition(FieldQuery("location.city", MatchStrategy.TEXT, "fez"), COLUMNS)
    assert sql == "location->>'city' ILIKE %s"
    assert params == ["%fez%"]


def test_exact_strategies_use_equality() -> None:
    place_id = uuid4()
    assert build_condition(FieldQuery("id", MatchStrategy.ID, place_id), COLUMNS) == (
        "id = %s",
        [place_id],
    )
    assert build_condition(FieldQuery("approved", MatchStrategy.BOOL, True), COLUMNS) == (
        "approved = %s",
        [True],
    )


def test_date_becomes_half_open_utc_day_range() -> None:
    sql, params = build_condition(
        FieldQuery("date_of_visit", MatchStrategy.DATE, date(2024, 6, 1)), COLUMNS
    )
    assert sql == "date_of_visit >= %s AND date_of_visit < %s"
    assert params == [
        datetime(2024, 6, 1, tzinfo=UTC),
        datetime(2024, 6, 2, tzinfo=UTC),
    ]


def test_member_expression_carries_its_own_placeholder() -> None:
    perm_id = uuid4()
    sql, params = build_condition(
        FieldQuery("permission_ids", MatchStrategy.MEMBER, perm_id), COLUMNS
    )
    assert sql == COLUMNS["permission_ids"]
    assert params == [perm_id]
