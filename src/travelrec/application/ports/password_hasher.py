"""Password hasher port."""

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for hashing and verifying passwords."""

    async def hash(self, password: str) -> str: ...

    async def verify(self, password: str, password_hash: str) -> bool: ...
