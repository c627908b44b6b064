"""Unit tests for domain exceptions."""

import pytest

from travelrec.domain.exceptions import (
    AuthenticationFailed,
    Conflict,
    DanglingReference,
    IntegrityError,
    NotFound,
    PermissionDenied,
    TravelRecError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc_type",
    [
        AuthenticationFailed,
        Conflict,
        DanglingReference,
        IntegrityError,
        NotFound,
        PermissionDenied,
        ValidationError,
    ],
)
def test_domain_errors_inherit_travelrec_error(exc_type) -> None:
    assert issubclass(exc_type, TravelRecError)


def test_not_found_message_names_entity_and_id() -> None:
    """NotFound carries the entity and id it failed to resolve."""
    err = NotFound("Place", "42")
    assert err.entity == "Place"
    assert err.entity_id == "42"
    assert str(err) == "Place not found with id=42"


def test_raise_permission_denied_catchable_as_travelrec_error() -> None:
    with pytest.raises(TravelRecError, match="nope"):
        raise PermissionDenied("nope")
