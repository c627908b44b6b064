"""Field query DTO - typed filter parsed from `field`/`value` query params."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from travelrec.domain.exceptions import ValidationError
from travelrec.domain.value_objects import MatchStrategy


@dataclass(frozen=True)
class QueryableField:
    """Entity attribute a public field name maps to, and how it is compared."""

    attribute: str
    strategy: MatchStrategy


@dataclass(frozen=True)
class FieldQuery:
    """Parsed filter: attribute, comparison strategy and typed value."""

    attribute: str
    strategy: MatchStrategy
    value: UUID | str | bool | float | date


def parse_field_query(
    fields: Mapping[str, QueryableField], field: str | None, value: str | None
) -> FieldQuery:
    """Resolve a public field name and raw value into a FieldQuery.

    Raises ValidationError for missing input, unknown fields and values that
    do not parse for the field's strategy.
    """
    if not field or not value:
        raise ValidationError("Field and value are required!")
    queryable = fields.get(field)
    if queryable is None:
        raise ValidationError(f"Field '{field}' cannot be queried!")

    strategy = queryable.strategy
    if strategy in (MatchStrategy.ID, MatchStrategy.MEMBER):
        try:
            parsed: UUID | str | bool | float | date = UUID(value)
        except ValueError:
            raise ValidationError("Invalid Id format!") from None
    elif strategy == MatchStrategy.BOOL:
        lowered = value.lower()
        if lowered not in ("true", "false"):
            raise ValidationError("Invalid boolean value!")
        parsed = lowered == "true"
    elif strategy == MatchStrategy.NUMBER:
        try:
            parsed = float(value)
        except ValueError:
            raise ValidationError("Invalid number value!") from None
    elif strategy == MatchStrategy.DATE:
        try:
            parsed = date.fromisoformat(value[:10])
        except ValueError:
            raise ValidationError("Invalid date format!") from None
    else:
        parsed = value

    return FieldQuery(attribute=queryable.attribute, strategy=strategy, value=parsed)


USER_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "firstName": QueryableField("first_name", MatchStrategy.TEXT),
    "lastName": QueryableField("last_name", MatchStrategy.TEXT),
    "username": QueryableField("username", MatchStrategy.TEXT),
    "email": QueryableField("email", MatchStrategy.TEXT),
    "bio": QueryableField("bio", MatchStrategy.TEXT),
    "country": QueryableField("country", MatchStrategy.TEXT),
    "city": QueryableField("city", MatchStrategy.TEXT),
    "role": QueryableField("role_id", MatchStrategy.ID),
    "registerDate": QueryableField("register_date", MatchStrategy.DATE),
}

ROLE_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "name": QueryableField("name", MatchStrategy.TEXT),
    "permissions": QueryableField("permission_ids", MatchStrategy.MEMBER),
}

PERMISSION_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "name": QueryableField("name", MatchStrategy.TEXT),
    "description": QueryableField("description", MatchStrategy.TEXT),
}

PLACE_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "name": QueryableField("name", MatchStrategy.TEXT),
    "description": QueryableField("description", MatchStrategy.TEXT),
    "continent": QueryableField("location.continent", MatchStrategy.TEXT),
    "country": QueryableField("location.country", MatchStrategy.TEXT),
    "city": QueryableField("location.city", MatchStrategy.TEXT),
    "upvotes": QueryableField("upvotes", MatchStrategy.NUMBER),
    "approved": QueryableField("approved", MatchStrategy.BOOL),
    "_createdBy": QueryableField("created_by", MatchStrategy.ID),
}

RECOMMENDATION_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "_createdBy": QueryableField("created_by", MatchStrategy.ID),
    "place": QueryableField("place_id", MatchStrategy.ID),
    "title": QueryableField("title", MatchStrategy.TEXT),
    "content": QueryableField("content", MatchStrategy.TEXT),
    "rating": QueryableField("rating", MatchStrategy.NUMBER),
    "upvotes": QueryableField("upvotes", MatchStrategy.NUMBER),
    "dateOfVisit": QueryableField("date_of_visit", MatchStrategy.DATE),
    "dateOfWriting": QueryableField("date_of_writing", MatchStrategy.DATE),
}

COLLECTION_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "_createdBy": QueryableField("created_by", MatchStrategy.ID),
    "name": QueryableField("name", MatchStrategy.TEXT),
    "places": QueryableField("place_ids", MatchStrategy.MEMBER),
    "visible": QueryableField("visible", MatchStrategy.BOOL),
}

CITY_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "name": QueryableField("name", MatchStrategy.TEXT),
    "country": QueryableField("country", MatchStrategy.TEXT),
}

COUNTRY_FIELDS: dict[str, QueryableField] = {
    "_id": QueryableField("id", MatchStrategy.ID),
    "name": QueryableField("name", MatchStrategy.TEXT),
}
