"""Role repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def find(self, query: FieldQuery) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...

    async def exists_with_permission(self, permission_id: UUID) -> bool: ...

    async def get_permission_names(self, role_id: UUID) -> list[str]: ...

    async def delete_all(self) -> None: ...
