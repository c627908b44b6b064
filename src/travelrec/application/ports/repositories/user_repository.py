"""User repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def list_all(self) -> list[User]: ...

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]: ...

    async def find(self, query: FieldQuery) -> list[User]: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...

    async def exists_with_role(self, role_id: UUID) -> bool: ...

    async def delete_all(self) -> None: ...
