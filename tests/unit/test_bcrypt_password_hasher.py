"""Tests for BcryptPasswordHasher."""

import pytest

from travelrec.domain.exceptions import ValidationError
from travelrec.infrastructure.auth.bcrypt_password_hasher import BcryptPasswordHasher


@pytest.mark.asyncio
async def test_hash_verifies_only_the_hashed_password() -> None:
    hasher = BcryptPasswordHasher(rounds=4)
    password_hash = await hasher.hash("tangier1")

    assert password_hash != "tangier1"
    assert await hasher.verify("tangier1", password_hash) is True
    assert await hasher.verify("tangier2", password_hash) is False


@pytest.mark.asyncio
async def test_hashes_are_salted() -> None:
    hasher = BcryptPasswordHasher(rounds=4)
    assert await hasher.hash("same-one") != await hasher.hash("same-one")


@pytest.mark.asyncio
async def test_malformed_hash_does_not_verify() -> None:
    hasher = BcryptPasswordHasher(rounds=4)
    assert await hasher.verify("secret1", "not-a-bcrypt-hash") is False


@pytest.mark.asyncio
async def test_password_over_72_bytes_is_a_validation_error() -> None:
    hasher = BcryptPasswordHasher(rounds=4)
    with pytest.raises(ValidationError, match="72 bytes"):
        await hasher.hash("é" * 40)


def test_rounds_below_minimum_refused() -> None:
    with pytest.raises(ValueError):
        BcryptPasswordHasher(rounds=3)
