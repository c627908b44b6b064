"""Tests for field query parsing and in-memory matching."""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from travelrec.application.dto.field_query import (
    PLACE_FIELDS,
    RECOMMENDATION_FIELDS,
    ROLE_FIELDS,
    USER_FIELDS,
    parse_field_query,
)
from travelrec.domain.exceptions import ValidationError
from travelrec.domain.value_objects import MatchStrategy

from tests.conftest import make_place, make_recommendation, matches


@pytest.mark.parametrize("field,value", [(None, "x"), ("name", None), ("", ""), ("name", "")])
def test_field_and_value_are_required(field, value) -> None:
    with pytest.raises(ValidationError, match="Field and value are required!"):
        parse_field_query(PLACE_FIELDS, field, value)


def test_password_hash_is_not_queryable() -> None:
    with pytest.raises(ValidationError, match="cannot be queried"):
        parse_field_query(USER_FIELDS, "passwordHash", "anything")


def test_unknown_field_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_field_query(PLACE_FIELDS, "secretSauce", "1")


def test_id_field_parses_uuid() -> None:
    place_id = uuid4()
    query = parse_field_query(PLACE_FIELDS, "_id", str(place_id))
    assert query.attribute == "id"
    assert query.strategy == MatchStrategy.ID
    assert query.value == place_id


def test_malformed_id_rejected() -> None:
    with pytest.raises(ValidationError, match="Invalid Id format!"):
        parse_field_query(RECOMMENDATION_FIELDS, "place", "12345")


def test_bool_field_accepts_true_false_only() -> None:
    assert parse_field_query(PLACE_FIELDS, "approved", "TRUE").value is True
    assert parse_field_query(PLACE_FIELDS, "approved", "false").value is False
    with pytest.raises(ValidationError, match="Invalid boolean value!"):
        parse_field_query(PLACE_FIELDS, "approved", "yes")


def test_number_field() -> None:
    assert parse_field_query(RECOMMENDATION_FIELDS, "rating", "4").value == 4.0
    with pytest.raises(ValidationError, match="Invalid number value!"):
        parse_field_query(RECOMMENDATION_FIELDS, "rating", "four")


def test_date_field_takes_calendar_day() -> None:
    query = parse_field_query(RECOMMENDATION_FIELDS, "dateOfVisit", "2024-06-01T15:00:00Z")
    assert query.value == date(2024, 6, 1)
    with pytest.raises(ValidationError, match="Invalid date format!"):
        parse_field_query(RECOMMENDATION_FIELDS, "dateOfVisit", "June 1st")


def test_member_field_maps_to_link_list() -> None:
    query = parse_field_query(ROLE_FIELDS, "permissions", str(uuid4()))
    assert query.attribute == "permission_ids"
    assert query.strategy == MatchStrategy.MEMBER


def test_text_match_is_case_insensitive_substring() -> None:
    place = make_place(uuid4(), name="Old Bridge")
    assert matches(place, parse_field_query(PLACE_FIELDS, "name", "bridge"))
    assert matches(place, parse_field_query(PLACE_FIELDS, "city", "MOST"))
    assert not matches(place, parse_field_query(PLACE_FIELDS, "name", "tower"))


def test_date_match_covers_whole_day() -> None:
    rec = make_recommendation(uuid4(), uuid4())
    rec.date_of_visit = datetime(2024, 6, 1, 23, 59, tzinfo=UTC)
    assert matches(rec, parse_field_query(RECOMMENDATION_FIELDS, "dateOfVisit", "2024-06-01"))
    assert not matches(rec, parse_field_query(RECOMMENDATION_FIELDS, "dateOfVisit", "2024-06-02"))
