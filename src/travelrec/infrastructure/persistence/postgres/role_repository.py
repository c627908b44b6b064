"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Role
from travelrec.infrastructure.persistence.postgres.filters import build_condition

_SELECT = (
    "SELECT r.id, r.name, "
    "COALESCE(array_agg(rp.permission_id) FILTER (WHERE rp.permission_id IS NOT NULL), '{}') "
    "FROM role r LEFT JOIN role_permission rp ON rp.role_id = r.id"
)
_GROUP = " GROUP BY r.id, r.name ORDER BY r.name"

_COLUMNS = {
    "id": "r.id",
    "name": "r.name",
    "permission_ids": (
        "r.id IN (SELECT role_id FROM role_permission WHERE permission_id = %s)"
    ),
}


def _row_to_role(r) -> Role:
    return Role(id=r[0], name=r[1], permission_ids=list(r[2]))


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE r.id = %s{_GROUP}", (role_id,))
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name, ignoring case and surrounding whitespace."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE lower(r.name) = lower(%s){_GROUP}", (name.strip(),)
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"{_SELECT}{_GROUP}")
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[Role]:
        """List roles matching a field query."""
        condition, params = build_condition(query, _COLUMNS)
        cur = await self._conn.execute(f"{_SELECT} WHERE {condition}{_GROUP}", params)
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def _replace_permissions(self, role: Role) -> None:
        await self._conn.execute("DELETE FROM role_permission WHERE role_id = %s", (role.id,))
        for permission_id in role.permission_ids:
            await self._conn.execute(
                "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s)",
                (role.id, permission_id),
            )

    async def create(self, role: Role) -> Role:
        """Create role with its permission links."""
        await self._conn.execute(
            "INSERT INTO role (id, name) VALUES (%s, %s)", (role.id, role.name)
        )
        await self._replace_permissions(role)
        return role

    async def update(self, role: Role) -> None:
        """Update role name and permission links."""
        await self._conn.execute("UPDATE role SET name=%s WHERE id=%s", (role.name, role.id))
        await self._replace_permissions(role)

    async def delete(self, role_id: UUID) -> None:
        """Delete role (permission links cascade)."""
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    async def exists_with_permission(self, permission_id: UUID) -> bool:
        """True if any role grants the permission."""
        cur = await self._conn.execute(
            "SELECT 1 FROM role_permission WHERE permission_id = %s LIMIT 1",
            (permission_id,),
        )
        return await cur.fetchone() is not None

    async def get_permission_names(self, role_id: UUID) -> list[str]:
        """Get names of the permissions granted by role."""
        cur = await self._conn.execute(
            "SELECT p.name FROM role_permission rp "
            "JOIN permission p ON p.id = rp.permission_id WHERE rp.role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]

    async def delete_all(self) -> None:
        """Delete every role."""
        await self._conn.execute("DELETE FROM role")
