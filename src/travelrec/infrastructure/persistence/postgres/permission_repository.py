"""PostgreSQL permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Permission
from travelrec.infrastructure.persistence.postgres.filters import build_condition

_SELECT = "SELECT id, name, description FROM permission"

_COLUMNS = {
    "id": "id",
    "name": "name",
    "description": "description",
}


def _row_to_permission(r) -> Permission:
    return Permission(id=r[0], name=r[1], description=r[2])


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE id = %s", (permission_id,))
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def get_by_name(self, name: str) -> Permission | None:
        """Get permission by exact name."""
        cur = await self._conn.execute(f"{_SELECT} WHERE name = %s", (name,))
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def list_all(self) -> list[Permission]:
        """List all permissions."""
        cur = await self._conn.execute(f"{_SELECT} ORDER BY name")
        return [_row_to_permission(r) for r in await cur.fetchall()]

    async def list_by_ids(self, permission_ids: list[UUID]) -> list[Permission]:
        """List permissions with the given ids."""
        if not permission_ids:
            return []
        cur = await self._conn.execute(
            f"{_SELECT} WHERE id = ANY(%s) ORDER BY name", (list(permission_ids),)
        )
        return [_row_to_permission(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[Permission]:
        """List permissions matching a field query."""
        condition, params = build_condition(query, _COLUMNS)
        cur = await self._conn.execute(f"{_SELECT} WHERE {condition} ORDER BY name", params)
        return [_row_to_permission(r) for r in await cur.fetchall()]

    async def create(self, permission: Permission) -> Permission:
        """Create permission."""
        await self._conn.execute(
            "INSERT INTO permission (id, name, description) VALUES (%s, %s, %s)",
            (permission.id, permission.name, permission.description),
        )
        return permission

    async def delete(self, permission_id: UUID) -> None:
        """Delete permission."""
        await self._conn.execute("DELETE FROM permission WHERE id = %s", (permission_id,))

    async def delete_all(self) -> None:
        """Delete every permission."""
        await self._conn.execute("DELETE FROM permission")
