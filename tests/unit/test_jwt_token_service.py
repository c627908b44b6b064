"""Tests for JWTTokenService."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from travelrec.infrastructure.auth.jwt_token_service import JWTTokenService

from tests.conftest import TEST_SECRET, make_user


def test_issue_then_verify_returns_identity_claims() -> None:
    service = JWTTokenService(TEST_SECRET)
    user = make_user(uuid4(), "ada")

    claims = service.verify(service.issue(user))

    assert claims.id == str(user.id)
    assert claims.username == "ada"
    assert claims.email == "ada@example.com"
    assert claims.first_name == "Ada"


def test_token_expires_after_ttl() -> None:
    service = JWTTokenService(TEST_SECRET, ttl_hours=2)
    payload = jwt.decode(
        service.issue(make_user(uuid4())), TEST_SECRET, algorithms=["HS256"]
    )
    assert payload["exp"] - payload["iat"] == 2 * 3600


def test_expired_token_rejected() -> None:
    past = datetime.now(UTC) - timedelta(hours=3)
    token = jwt.encode(
        {"id": str(uuid4()), "iat": int(past.timestamp()), "exp": int(past.timestamp()) + 60},
        TEST_SECRET,
        algorithm="HS256",
    )
    assert JWTTokenService(TEST_SECRET).verify(token) is None


def test_foreign_signature_rejected() -> None:
    other = JWTTokenService("another-secret-that-is-long-enough-123")
    token = other.issue(make_user(uuid4()))
    assert JWTTokenService(TEST_SECRET).verify(token) is None


def test_garbage_rejected() -> None:
    assert JWTTokenService(TEST_SECRET).verify("not.a.token") is None


def test_empty_secret_refused() -> None:
    with pytest.raises(ValueError):
        JWTTokenService("")
