"""Tests for request schemas: constraints, aliases and markup escaping."""

from uuid import uuid4

import pytest

from travelrec.domain.exceptions import ValidationError
from travelrec.interfaces.api.schemas.auth_schemas import LoginRequest, RegisterRequest
from travelrec.interfaces.api.schemas.common import escape_markup, parse_body
from travelrec.interfaces.api.schemas.content_schemas import (
    CityImagesRequest,
    RecommendationRequest,
)
from travelrec.interfaces.api.schemas.place_schemas import PlaceRequest
from travelrec.interfaces.api.schemas.user_schemas import UserUpdateRequest

PLACE_BODY = {
    "name": "Old Bridge",
    "description": "Rebuilt bridge",
    "images": ["https://img.example.com/bridge.jpg"],
    "location": {
        "continent": "Europe",
        "country": "Bosnia and Herzegovina",
        "city": "Mostar",
        "street": "Stari most",
        "streetNumber": "1",
    },
    "tags": ["bridge"],
}


def test_escape_markup_neutralizes_tags() -> None:
    assert escape_markup("<script>alert(1)</script>") == "&lt;script&gt;alert(1)&lt;/script&gt;"
    assert escape_markup("Fish & chips") == "Fish & chips"


def test_register_accepts_legacy_password_hash_key() -> None:
    body = parse_body(
        RegisterRequest,
        {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "username": "ada",
            "email": "ada@example.com",
            "passwordHash": "secret1",
        },
    )
    data = body.to_input()
    assert data.first_name == "Ada"
    assert data.password == "secret1"


@pytest.mark.parametrize(
    "body",
    [
        {"email": "not-an-email", "password": "secret1"},
        {"email": "ada@example.com", "password": "short"},
        {"email": "ada@example.com", "password": "x" * 73},
        {"email": "ada@example.com"},
    ],
)
def test_login_constraints(body) -> None:
    with pytest.raises(ValidationError):
        parse_body(LoginRequest, body)


def _registration(password: str) -> dict:
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "username": "ada",
        "email": "ada@example.com",
        "password": password,
    }


def test_password_limit_counts_utf8_bytes() -> None:
    # 36 two-byte characters fill bcrypt's 72 bytes exactly
    assert parse_body(RegisterRequest, _registration("é" * 36)).password == "é" * 36
    with pytest.raises(ValidationError, match="72 bytes"):
        parse_body(RegisterRequest, _registration("é" * 40))


def test_text_length_is_checked_after_escaping() -> None:
    body = {"lastName": "Lovelace", "username": "ada"}

    data = parse_body(UserUpdateRequest, dict(body, firstName="<" * 25)).to_input()
    assert len(data.first_name) == 100

    with pytest.raises(ValidationError, match="firstName: .*at most 100 characters"):
        parse_body(UserUpdateRequest, dict(body, firstName="<" * 100))


def test_non_object_body_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_body(LoginRequest, ["ada@example.com"])
    with pytest.raises(ValidationError):
        parse_body(LoginRequest, None)


def test_place_text_is_escaped_and_location_mapped() -> None:
    body = dict(PLACE_BODY, name="<b>Old Bridge</b>")
    data = parse_body(PlaceRequest, body).to_input()
    assert data.name == "&lt;b&gt;Old Bridge&lt;/b&gt;"
    assert data.location.street_number == "1"
    assert data.upvotes is None
    assert data.approved is None


def test_place_rejects_short_name() -> None:
    with pytest.raises(ValidationError, match="name"):
        parse_body(PlaceRequest, dict(PLACE_BODY, name="X"))


def test_recommendation_rating_bounds() -> None:
    body = {
        "place": str(uuid4()),
        "title": "Lovely",
        "content": "Go at dawn",
        "dateOfVisit": "2024-06-01T09:00:00Z",
        "rating": 6,
    }
    with pytest.raises(ValidationError):
        parse_body(RecommendationRequest, body)
    data = parse_body(RecommendationRequest, dict(body, rating=5)).to_input()
    assert data.rating == 5
    assert data.upvotes == 0


def test_user_update_ignores_immutable_fields() -> None:
    body = parse_body(
        UserUpdateRequest,
        {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "username": "ada",
            "email": "changed@example.com",
            "passwordHash": "nope",
            "profilePicture": "",
        },
    )
    data = body.to_input()
    assert data.role_id is None
    assert not hasattr(data, "email")


def test_user_update_rejects_bad_profile_picture() -> None:
    with pytest.raises(ValidationError):
        parse_body(
            UserUpdateRequest,
            {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "username": "ada",
                "profilePicture": "nope",
            },
        )


def test_city_image_url_must_be_uri() -> None:
    body = {"name": "Fez", "country": "Morocco", "images": [{"url": "nope", "alt": "Medina"}]}
    with pytest.raises(ValidationError):
        parse_body(CityImagesRequest, body)
    body["images"][0]["url"] = "https://img.example.com/fez.jpg"
    data = parse_body(CityImagesRequest, body).to_input()
    assert data.images[0].alt == "Medina"
