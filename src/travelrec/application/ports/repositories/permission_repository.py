"""Permission repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission persistence."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def get_by_name(self, name: str) -> Permission | None: ...

    async def list_all(self) -> list[Permission]: ...

    async def list_by_ids(self, permission_ids: list[UUID]) -> list[Permission]: ...

    async def find(self, query: FieldQuery) -> list[Permission]: ...

    async def create(self, permission: Permission) -> Permission: ...

    async def delete(self, permission_id: UUID) -> None: ...

    async def delete_all(self) -> None: ...
