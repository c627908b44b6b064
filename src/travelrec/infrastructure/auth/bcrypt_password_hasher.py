"""Bcrypt password hashing."""

import asyncio

import bcrypt

from travelrec.domain.exceptions import ValidationError

MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher:
    """Hashes passwords with bcrypt off the event loop."""

    def __init__(self, rounds: int = 10) -> None:
        if rounds < 4:
            raise ValueError("bcrypt rounds must be at least 4")
        self._rounds = rounds

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    async def hash(self, password: str) -> str:
        """Hash password with a fresh salt; over 72 bytes is a ValidationError."""
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return await asyncio.to_thread(self._hash, password)

    def _verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check password against a stored hash; malformed hashes never match."""
        return await asyncio.to_thread(self._verify, password, password_hash)
